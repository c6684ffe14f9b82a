# storefront/api/routers/users.py
from fastapi import APIRouter, Depends

from storefront.data.database import InMemoryStore, get_store
from storefront.domain.schemas import Envelope, LoginIn, SignupIn, UserOut
from storefront.services.user_service import UserService

router = APIRouter(tags=["users"])


def get_service(store: InMemoryStore = Depends(get_store)):
    return UserService(store)


@router.post("/signup", response_model=Envelope[UserOut], status_code=201)
def signup(payload: SignupIn, svc: UserService = Depends(get_service)):
    user = svc.signup(email=payload.email, name=payload.name, password=payload.password)
    return {"msg": "Success", "data": user}


@router.post("/login", response_model=Envelope[UserOut], status_code=201)
def login(payload: LoginIn, svc: UserService = Depends(get_service)):
    return {"msg": "Success", "data": svc.login(payload.email, payload.password)}
