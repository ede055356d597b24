"""用户资料数据操作

定义对资料数据的增删改查操作，以及供应商候选池的查询
"""

from sqlalchemy.orm import Session
from .. import models, schemas


def create_profile(db: Session, profile: schemas.ProfileCreate):
    """创建资料"""
    db_profile = models.Profile(**profile.model_dump())
    db.add(db_profile)
    db.commit()
    db.refresh(db_profile)
    return db_profile


def get_profile(db: Session, profile_id: int):
    """根据ID获取资料"""
    return db.query(models.Profile).filter(models.Profile.id == profile_id).first()


def get_profile_by_email(db: Session, email: str):
    """根据邮箱查找资料（用于避免重复注册）"""
    return db.query(models.Profile).filter(models.Profile.email == email).first()


def verify_supplier(db: Session, profile_id: int):
    """将供应商资料标记为已认证；非供应商返回 None"""
    db_profile = get_profile(db, profile_id)
    if not db_profile or db_profile.role != models.RoleEnum.supplier:
        return None
    db_profile.is_verified = True
    db.commit()
    db.refresh(db_profile)
    return db_profile


def list_verified_suppliers(db: Session):
    """获取已认证的供应商资料，按 id 排序（即匹配时的加载顺序）"""
    return (
        db.query(models.Profile)
        .filter(models.Profile.role == models.RoleEnum.supplier)
        .filter(models.Profile.is_verified.is_(True))
        .order_by(models.Profile.id)
        .all()
    )
