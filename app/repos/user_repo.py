from decimal import Decimal

from sqlalchemy import update
from sqlalchemy.orm import Session

from app.data.models.user import UserModel


class UserRepo:
    def __init__(self, db: Session):
        self.db = db

    def get_user(self, user_id: str) -> UserModel | None:
        return self.db.get(UserModel, user_id)

    def create_user(self, user: UserModel) -> UserModel:
        self.db.add(user)
        self.db.commit()
        self.db.refresh(user)
        return user

    def debit_wallet(self, user_id: str, amount: Decimal) -> int:
        """
        Warunkowy update salda: UPDATE users SET wallet_balance = wallet_balance - x
        WHERE id = u AND wallet_balance >= x. Zwraca rowcount, 0 = brak srodkow.
        Nie commituje - commit robi serwis.
        """
        stmt = (
            update(UserModel)
            .where(UserModel.id == user_id, UserModel.wallet_balance >= amount)
            .values(wallet_balance=UserModel.wallet_balance - amount)
            .execution_options(synchronize_session=False)
        )
        result = self.db.execute(stmt)
        return result.rowcount
