# cat_api/api/adopt.py

import logging
from pydantic import BaseModel
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from cat_api.api.auth import CurrentUser, get_current_user
from cat_api.core.errors import ValidationError
from cat_api.database import get_db
from cat_api.models import Adoption, Cat


logger = logging.getLogger(__name__)

router = APIRouter(tags=["adoption"])


class AdoptRequest(BaseModel):
    catId: str | None = None


@router.post("/adopt")
def adopt_cat(
    req: AdoptRequest,
    db: Session = Depends(get_db),
    user: CurrentUser = Depends(get_current_user),
):
    """
    Records that the logged-in user adopted a cat.
    Every call adds a new row; adopting the same cat twice is allowed.
    """
    cat_id = (req.catId or "").strip()
    if not cat_id:
        raise ValidationError("Cat ID is required")

    db.add(Adoption(cat_id=cat_id, user_id=user.user_id))
    db.commit()

    logger.info("User %s adopted cat %s", user.username, cat_id)
    return {"message": "Cat adopted successfully"}


@router.get("/adopted")
def list_adopted(
    db: Session = Depends(get_db),
    user: CurrentUser = Depends(get_current_user),
):
    """
    Lists the user's adoptions with the cat's current details.
    A cat deleted after adoption leaves its row in the list with null details.
    """
    rows = (
        db.query(Adoption.id, Adoption.cat_id, Adoption.adoption_date, Cat.tag, Cat.img, Cat.description)
        .outerjoin(Cat, Cat.id == Adoption.cat_id)
        .filter(Adoption.user_id == user.user_id)
        .order_by(Adoption.adoption_date.desc(), Adoption.id.desc())
        .all()
    )

    return [
        {
            "id": r.id,
            "catId": r.cat_id,
            "adoptionDate": r.adoption_date.isoformat() if r.adoption_date else None,
            "tag": r.tag,
            "img": r.img,
            "description": r.description,
        }
        for r in rows
    ]
