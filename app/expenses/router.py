from fastapi import APIRouter, Depends, status
from loguru import logger
from sqlalchemy.orm import Session
from typing import List

from app.database import get_db
from . import schemas, service
from .ownership import get_owned_expense

from app.users.auth import get_current_user
from app.users import schemas as user_schemas


router = APIRouter()


@router.post("", response_model=schemas.ExpenseOut, status_code=status.HTTP_201_CREATED)
def create_expense(
    expense: schemas.ExpenseCreate,
    db: Session = Depends(get_db),
    current_user: user_schemas.UserDisplaySchema = Depends(get_current_user),
):
    new_expense = service.create_expense(db, current_user.id, expense)
    logger.info(f"Expense {new_expense.id} created by user {current_user.id}")
    return new_expense


@router.get("", response_model=List[schemas.ExpenseOut])
def list_expenses(
    db: Session = Depends(get_db),
    current_user: user_schemas.UserDisplaySchema = Depends(get_current_user),
):
    return service.list_expenses_by_owner(db, current_user.id)


@router.get("/{expense_id}", response_model=schemas.ExpenseOut)
def get_expense(
    expense_id: int,
    db: Session = Depends(get_db),
    current_user: user_schemas.UserDisplaySchema = Depends(get_current_user),
):
    return get_owned_expense(db, expense_id, current_user)


@router.put("/{expense_id}", response_model=schemas.ExpenseOut)
def update_expense(
    expense_id: int,
    expense: schemas.ExpenseUpdate,
    db: Session = Depends(get_db),
    current_user: user_schemas.UserDisplaySchema = Depends(get_current_user),
):
    get_owned_expense(db, expense_id, current_user)
    updated = service.update_expense(db, expense_id, expense)
    logger.info(f"Expense {expense_id} updated by user {current_user.id}")
    return updated


@router.delete("/{expense_id}", response_model=schemas.MessageOut)
def delete_expense(
    expense_id: int,
    db: Session = Depends(get_db),
    current_user: user_schemas.UserDisplaySchema = Depends(get_current_user),
):
    get_owned_expense(db, expense_id, current_user)
    service.delete_expense(db, expense_id)
    logger.info(f"Expense {expense_id} removed by user {current_user.id}")
    return {"message": "Expense removed"}
