#import wszystkich modeli zeby SQLAlchemy je zarejestrowal w base metadata

from app.data.models.user import UserModel
from app.data.models.order import OrderModel
from app.data.models.wallet_transaction import WalletTransactionModel

__all__ = ["UserModel", "OrderModel", "WalletTransactionModel"]
