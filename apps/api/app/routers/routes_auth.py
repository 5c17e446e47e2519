from fastapi import APIRouter, Depends, Request

from watchwise_user.accounts.schemas import UserOut
from watchwise_user.accounts.user_service import AccountService

from app.deps.deps_services import get_account_service
from app.deps.session_auth import end_session, get_session_user_id, start_session
from app.schemas import CredentialsRequest, LinkRequest, MeOut, SuccessOut

router = APIRouter(prefix="/api/auth", tags=["auth"])


# ---- Register (email + password) ----
@router.post("/register", response_model=UserOut, status_code=201)
async def register(
    req: CredentialsRequest,
    request: Request,
    service: AccountService = Depends(get_account_service),
):
    user = await service.register(req.email or "", req.password or "")
    start_session(request, user.id)
    return user


# ---- Login ----
@router.post("/login", response_model=UserOut)
async def login(
    req: CredentialsRequest,
    request: Request,
    service: AccountService = Depends(get_account_service),
):
    user = await service.authenticate(req.email or "", req.password or "")
    start_session(request, user.id)
    return user


# ---- Logout ----
@router.post("/logout", response_model=SuccessOut)
async def logout(request: Request):
    end_session(request)
    return SuccessOut()


# ---- Current session user ----
@router.get("/me", response_model=MeOut)
async def me(
    request: Request,
    service: AccountService = Depends(get_account_service),
):
    user_id = get_session_user_id(request)
    if not user_id:
        return MeOut(user=None)
    return MeOut(user=await service.get(user_id))


# ---- Upgrade an anonymous user in place ----
@router.post("/link", response_model=UserOut)
async def link(
    req: LinkRequest,
    request: Request,
    service: AccountService = Depends(get_account_service),
):
    user = await service.link(req.user_id or "", req.email or "", req.password or "")
    start_session(request, user.id)
    return user


# ---- Anonymous session ----
@router.post("/anonymous", response_model=UserOut, status_code=201)
async def anonymous(
    request: Request,
    service: AccountService = Depends(get_account_service),
):
    user = await service.create_anonymous()
    start_session(request, user.id)
    return user
