"""资料API路由

定义买家/供应商资料与供应商认证相关的API端点
"""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from ... import crud, schemas
from ...core.cache import VERIFIED_SUPPLIERS, query_cache
from ...core.loaders import cached_verified_suppliers
from ...database.connection import get_db

router = APIRouter()


@router.post("/profiles/", response_model=schemas.ProfileRead)
def create_profile(profile: schemas.ProfileCreate, db: Session = Depends(get_db)):
    """创建资料"""
    if profile.email and crud.get_profile_by_email(db, profile.email):
        raise HTTPException(status_code=400, detail="Email already registered")
    db_profile = crud.create_profile(db, profile)
    query_cache.invalidate(VERIFIED_SUPPLIERS)
    return db_profile


@router.get("/profiles/{profile_id}", response_model=schemas.ProfileRead)
def read_profile(profile_id: int, db: Session = Depends(get_db)):
    profile = crud.get_profile(db, profile_id)
    if not profile:
        raise HTTPException(status_code=404, detail="Profile not found")
    return profile


@router.post("/profiles/{profile_id}/verify", response_model=schemas.ProfileRead)
def verify_supplier(profile_id: int, db: Session = Depends(get_db)):
    """认证供应商，认证后进入匹配候选池"""
    profile = crud.verify_supplier(db, profile_id)
    if not profile:
        raise HTTPException(status_code=404, detail="Supplier not found")
    query_cache.invalidate(VERIFIED_SUPPLIERS)
    return profile


@router.get("/suppliers/verified", response_model=schemas.SupplierList)
def list_verified_suppliers(db: Session = Depends(get_db)):
    """已认证供应商及其工作量、准时交付率"""
    result = cached_verified_suppliers(db)
    return schemas.SupplierList(items=result.items, total=len(result.items), error=result.error)
