# app/services/wallet_service.py
from decimal import Decimal

from sqlalchemy.orm import Session

from app.domain.errors import WalletNotFound
from app.domain.schemas import WalletOut, WalletTransactionOut
from app.repos.user_repo import UserRepo
from app.repos.wallet_repo import WalletRepo


class WalletService:
    def __init__(self, db: Session):
        self.users = UserRepo(db)
        self.repo = WalletRepo(db)

    def get_wallet(self, user_id: str) -> WalletOut:
        user = self.users.get_user(user_id)
        if not user:
            raise WalletNotFound("User wallet not found")

        return WalletOut(
            user_id=user.id,
            balance=Decimal(user.wallet_balance),
            transactions=[
                WalletTransactionOut.model_validate(t)
                for t in self.repo.list_transactions(user_id)
            ],
        )
