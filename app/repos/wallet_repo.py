# app/repos/wallet_repo.py
from sqlalchemy import select
from sqlalchemy.orm import Session

from app.data.models.wallet_transaction import WalletTransactionModel


class WalletRepo:
    """Tylko insert i odczyt - ledger jest append-only."""

    def __init__(self, db: Session):
        self.db = db

    def add_transaction(self, tx: WalletTransactionModel) -> WalletTransactionModel:
        self.db.add(tx)
        self.db.flush()
        return tx

    def list_transactions(self, user_id: str) -> list[WalletTransactionModel]:
        return list(
            self.db.execute(
                select(WalletTransactionModel)
                .where(WalletTransactionModel.user_id == user_id)
                .order_by(WalletTransactionModel.created_at.desc())
            ).scalars()
        )
