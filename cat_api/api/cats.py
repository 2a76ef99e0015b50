# cat_api/api/cats.py

import logging
from enum import Enum
from typing import Any, Dict, Optional
from pydantic import BaseModel
from fastapi import APIRouter, Body, Depends
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from cat_api.api.auth import CurrentUser, get_current_user
from cat_api.core.errors import ConflictError, ValidationError
from cat_api.database import get_db
from cat_api.models import Cat


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/cats", tags=["cats"])


class CatField(str, Enum):
    """
    Columns a client may change. PATCH bodies are mapped through this
    enumeration, so no other column can be addressed.
    """
    TAG = "tag"
    IMG = "img"
    DESCRIPTION = "description"

    @property
    def column(self):
        return getattr(Cat, self.value)


class CatCreateRequest(BaseModel):
    id: str | None = None
    tag: str | None = None
    img: str | None = None
    description: str | None = None


class CatReplaceRequest(BaseModel):
    tag: str | None = None
    img: str | None = None
    description: str | None = None


class CatOut(BaseModel):
    id: str
    tag: str | None
    img: str | None
    description: str | None

    model_config = {"from_attributes": True}


def resolve_patch_fields(fields: Dict[str, Any]) -> Dict[CatField, Any]:
    """
    Validates a partial-update body and maps its keys onto CatField members.
    """
    if not fields:
        raise ValidationError("No fields provided for update")

    allowed = {f.value for f in CatField}
    unknown = sorted(k for k in fields if k not in allowed)
    if unknown:
        raise ValidationError(f"Unknown or read-only fields: {', '.join(unknown)}")

    return {CatField(k): v for k, v in fields.items()}


# -------------------------------
# Read Endpoints
# -------------------------------

@router.get("", response_model=list[CatOut])
def list_cats(db: Session = Depends(get_db)):
    return db.query(Cat).order_by(Cat.id).all()


@router.get("/{cat_id}", response_model=list[CatOut])
def get_cat(cat_id: str, db: Session = Depends(get_db)):
    """
    Returns a list holding the cat, or an empty list when it does not exist.
    """
    cat = db.get(Cat, cat_id)
    return [cat] if cat else []


# -------------------------------
# Write Endpoints (login required)
# -------------------------------

@router.post("")
def create_cat(
    req: CatCreateRequest,
    db: Session = Depends(get_db),
    user: CurrentUser = Depends(get_current_user),
):
    cat_id = (req.id or "").strip()
    if not cat_id:
        raise ValidationError("Cat id is required")

    if db.get(Cat, cat_id) is not None:
        raise ConflictError(f"Cat {cat_id} already exists")

    db.add(Cat(id=cat_id, tag=req.tag, img=req.img, description=req.description))
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise ConflictError(f"Cat {cat_id} already exists")

    logger.info("User %s added cat %s", user.username, cat_id)
    return {"message": f"Cat {cat_id} added"}


@router.put("/{cat_id}")
def replace_cat(
    cat_id: str,
    req: CatReplaceRequest,
    db: Session = Depends(get_db),
    user: CurrentUser = Depends(get_current_user),
):
    # Unknown ids match no row; the update is a no-op and still succeeds.
    db.query(Cat).filter(Cat.id == cat_id).update(
        {Cat.tag: req.tag, Cat.img: req.img, Cat.description: req.description}
    )
    db.commit()
    logger.info("User %s replaced cat %s", user.username, cat_id)
    return {"message": f"Cat {cat_id} updated"}


@router.patch("/{cat_id}")
def patch_cat(
    cat_id: str,
    fields: Dict[str, Optional[str]] = Body(...),
    db: Session = Depends(get_db),
    user: CurrentUser = Depends(get_current_user),
):
    changes = resolve_patch_fields(fields)
    db.query(Cat).filter(Cat.id == cat_id).update(
        {field.column: value for field, value in changes.items()}
    )
    db.commit()
    logger.info("User %s patched cat %s (%s)", user.username, cat_id, ", ".join(f.value for f in changes))
    return {"message": f"Cat {cat_id} partially updated"}


@router.delete("/{cat_id}")
def delete_cat(
    cat_id: str,
    db: Session = Depends(get_db),
    user: CurrentUser = Depends(get_current_user),
):
    db.query(Cat).filter(Cat.id == cat_id).delete()
    db.commit()
    logger.info("User %s deleted cat %s", user.username, cat_id)
    return {"message": f"Cat {cat_id} deleted"}
