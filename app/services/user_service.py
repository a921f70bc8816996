from sqlalchemy.orm import Session
from app.data.models.user import UserModel
from app.domain.errors import UserNotFound
from app.repos.user_repo import UserRepo
from app.domain.schemas import UserCreate, UserRead


class UserService:
    def __init__(self, db: Session):
        self.repo = UserRepo(db)

    def create_user(self, payload: UserCreate) -> UserRead:
        if payload.id:
            existing = self.repo.get_user(payload.id)
            if existing:
                return UserRead.model_validate(existing)

        user = UserModel(
            full_name=payload.full_name,
            wallet_balance=payload.wallet_balance,
        )
        if payload.id:
            user.id = payload.id
        created = self.repo.create_user(user)
        return UserRead.model_validate(created)

    def get_user(self, user_id: str) -> UserRead:
        user = self.repo.get_user(user_id)
        if not user:
            raise UserNotFound("User not found")
        return UserRead.model_validate(user)
