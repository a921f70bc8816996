from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.api.deps import http_error
from app.data.database import get_db
from app.domain.errors import WalletNotFound
from app.domain.schemas import WalletOut
from app.services.wallet_service import WalletService

router = APIRouter(prefix="/wallet", tags=["wallet"])


@router.get("/{user_id}", response_model=WalletOut)
def get_wallet(user_id: str, db: Session = Depends(get_db)):
    try:
        return WalletService(db).get_wallet(user_id)
    except WalletNotFound as e:
        raise http_error(e)
