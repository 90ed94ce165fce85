from sqlalchemy.orm import Session

from app.errors import NotFound

from . import models, schemas

MIN_ID = -(2 ** 63)
MAX_ID = 2 ** 63 - 1


# =========================
# Create Expense
# =========================
def create_expense(db: Session, owner_id: int, expense: schemas.ExpenseCreate):
    new_expense = models.Expense(
        owner_id=owner_id,
        date=expense.date,
        amount=expense.amount,
        category=expense.category,
        description=expense.description,
    )
    db.add(new_expense)
    db.commit()
    db.refresh(new_expense)
    return new_expense


# =========================
# List Expenses
# =========================
def list_expenses_by_owner(db: Session, owner_id: int):
    """Expenses owned by owner_id, oldest first (insertion order)."""
    return (
        db.query(models.Expense)
        .filter(models.Expense.owner_id == owner_id)
        .order_by(models.Expense.id.asc())
        .all()
    )


# =========================
# Get Expense by ID
# =========================
def get_expense(db: Session, expense_id: int):
    # Ids outside a signed 64-bit INTEGER can never exist
    if not MIN_ID <= expense_id <= MAX_ID:
        return None
    return db.query(models.Expense).filter(models.Expense.id == expense_id).first()


# =========================
# Update Expense
# =========================
def update_expense(db: Session, expense_id: int, expense_data: schemas.ExpenseUpdate):
    expense = get_expense(db, expense_id)
    if not expense:
        raise NotFound()

    # owner_id is deliberately absent from the editable fields
    expense.date = expense_data.date
    expense.amount = expense_data.amount
    expense.category = expense_data.category
    expense.description = expense_data.description

    db.commit()
    db.refresh(expense)
    return expense


# =========================
# Delete Expense
# =========================
def delete_expense(db: Session, expense_id: int):
    expense = get_expense(db, expense_id)
    if not expense:
        raise NotFound()

    db.delete(expense)
    db.commit()
