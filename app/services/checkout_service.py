# app/services/checkout_service.py
import uuid
from datetime import datetime, timezone, timedelta
from decimal import Decimal

from redis.exceptions import RedisError
from sqlalchemy.orm import Session

from app.data.models.order import OrderModel
from app.data.models.wallet_transaction import WalletTransactionModel
from app.domain.errors import (
    CheckoutInProgress,
    InsufficientBalance,
    UpstreamFailure,
    WalletNotFound,
)
from app.domain.money import parse_amount
from app.domain.schemas import OrderCreate, OrderOut, OrderStatus
from app.repos.order_repo import OrderRepo
from app.repos.user_repo import UserRepo
from app.repos.wallet_repo import WalletRepo
from app.services.cart_service import CartService
from app.services.lock_service import LockService
from app.services.notification_service import NotificationService
from app.utils.settings import ORDER_DELIVERY_DAYS, CHECKOUT_LOCK_TTL_SECONDS
from app.utils.logging import get_logger

logger = get_logger(__name__)


class CheckoutService:
    """
    Zamiana snapshotu koszyka w zamowienie.

    1. walidacja kwot (bez efektow ubocznych)
    2. lock checkoutu per user w redisie
    3. jesli placimy z portfela: odczyt salda, warunkowy debit
    4. insert zamowienia (pending, dostawa za 3 dni)
    5. wpis debit w ledgerze portfela
    6. commit 3-5 w jednej transakcji, blad => rollback calosci
    7. czyszczenie koszyka i powiadomienie - best effort
    """

    def __init__(
        self,
        db: Session,
        cart_service: CartService,
        lock_service: LockService,
        notification_service: NotificationService,
    ):
        self.db = db
        self.users = UserRepo(db)
        self.orders = OrderRepo(db)
        self.wallet = WalletRepo(db)
        self.cart_service = cart_service
        self.lock_service = lock_service
        self.notification_service = notification_service

    def checkout(self, payload: OrderCreate) -> OrderOut:
        user_id = payload.user_id

        # 1. walidacja, zero mutacji
        paid_from_wallet = parse_amount(payload.paid_from_wallet, "paidFromWallet")
        total_price = parse_amount(payload.total_price, "totalPrice")
        for p in payload.products:
            parse_amount(p.price, f"price of product {p.product_id}")

        # 2. lock per user
        token = uuid.uuid4().hex
        try:
            locked = self.lock_service.acquire_checkout_lock(
                user_id=user_id,
                token=token,
                ttl=CHECKOUT_LOCK_TTL_SECONDS,
            )
        except RedisError as e:
            logger.error(f"Checkout lock unavailable for user {user_id}: {e}")
            raise UpstreamFailure("Checkout lock unavailable") from e

        if not locked:
            raise CheckoutInProgress("Another checkout for this user is in progress")

        try:
            order = self._place_order(payload, total_price, paid_from_wallet)
        finally:
            try:
                self.lock_service.release_checkout_lock(user_id, token)
            except RedisError as e:
                # lock i tak wygasnie po TTL
                logger.warning(f"Failed to release checkout lock for user {user_id}: {e}")

        # 7. zamowienie juz jest, dalej tylko best effort
        try:
            self.cart_service.clear(user_id)
        except Exception as e:
            logger.warning(f"Order {order.id} placed but cart of user {user_id} was not cleared: {e}")

        try:
            self.notification_service.send_order_notification(user_id, order.id)
        except Exception as e:
            logger.warning(f"Order {order.id} placed but notification was not sent: {e}")

        return order

    def _place_order(
        self,
        payload: OrderCreate,
        total_price: Decimal,
        paid_from_wallet: Decimal,
    ) -> OrderOut:
        user_id = payload.user_id
        debited = False

        try:
            # 3. portfel
            if paid_from_wallet > 0:
                user = self.users.get_user(user_id)
                if user is None:
                    raise WalletNotFound("User wallet not found")

                balance = Decimal(user.wallet_balance)
                if balance < paid_from_wallet:
                    raise InsufficientBalance("Insufficient wallet balance")

                # UPDATE ... WHERE wallet_balance >= x, inny request mogl nas wyprzedzic
                rowcount = self.users.debit_wallet(user_id, paid_from_wallet)
                if rowcount == 0:
                    raise InsufficientBalance("Insufficient wallet balance")

                debited = True
                logger.info(f"Debited {paid_from_wallet} from wallet of user {user_id} (pending commit)")

            # 4. zamowienie
            now = datetime.now(timezone.utc)
            order = self.orders.add_order(
                OrderModel(
                    user_id=user_id,
                    products=[p.model_dump(by_alias=True, exclude_none=True) for p in payload.products],
                    total_price=total_price,
                    delivery_address=payload.delivery_address,
                    payment_method=payload.payment_method,
                    paid_from_wallet=paid_from_wallet,
                    status=OrderStatus.PENDING.value,
                    expected_delivery=now + timedelta(days=ORDER_DELIVERY_DAYS),
                    created_at=now,
                    updated_at=now,
                )
            )

            # 5. ledger
            if debited:
                self.wallet.add_transaction(
                    WalletTransactionModel(
                        user_id=user_id,
                        type="debit",
                        amount=paid_from_wallet,
                        description=f"Payment for Order #{order.id[:8]}",
                        order_id=order.id,
                        status="completed",
                    )
                )

            # odpowiedz z obiektu po flushu, po commicie nie czytamy juz bazy
            created = OrderOut.model_validate(order)

            # 6. wszystko albo nic
            self.db.commit()

        except (WalletNotFound, InsufficientBalance):
            self.db.rollback()
            raise

        except Exception as e:
            self.db.rollback()
            logger.error(
                f"Checkout rolled back for user {user_id}: wallet amount {paid_from_wallet}, "
                f"debit attempted={debited}, at {datetime.now(timezone.utc).isoformat()}: {e}"
            )
            raise UpstreamFailure("Failed to create order") from e

        logger.info(
            f"Order {created.id} created for user {user_id}, total {total_price}, "
            f"paid from wallet {paid_from_wallet}"
        )
        return created
