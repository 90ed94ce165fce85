from loguru import logger
from sqlalchemy.orm import Session

from app.errors import Forbidden, NotFound
from app.users.schemas import UserDisplaySchema

from . import service


def get_owned_expense(db: Session, expense_id: int, current_user: UserDisplaySchema):
    """
    Fetch an expense on behalf of current_user.

    Raises NotFound when the id does not exist (whoever asks) and Forbidden
    when it exists but belongs to someone else. Must be called before the
    expense is returned, updated or deleted.
    """
    expense = service.get_expense(db, expense_id)
    if not expense:
        raise NotFound()

    if expense.owner_id != current_user.id:
        logger.warning(
            f"User {current_user.id} denied access to expense {expense_id} "
            f"owned by {expense.owner_id}"
        )
        raise Forbidden()

    return expense
