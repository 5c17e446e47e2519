from fastapi import APIRouter, Depends

from watchwise_user.accounts.schemas import UserOut
from watchwise_user.accounts.user_service import AccountService
from watchwise_user.profile.profile_service import ProfileService
from watchwise_user.profile.schemas import ProfileOut

from app.deps.deps_services import get_account_service, get_profile_service
from app.schemas import SuccessOut

router = APIRouter(prefix="/api/users", tags=["users"])


# Legacy anonymous bootstrap; does not touch the session
@router.post("", response_model=UserOut, status_code=201)
async def create_user(service: AccountService = Depends(get_account_service)):
    return await service.create_anonymous()


@router.get("/{id}", response_model=UserOut)
async def get_user(id: str, service: AccountService = Depends(get_account_service)):
    return await service.require(id)


@router.post("/{id}/complete-onboarding", response_model=SuccessOut)
async def complete_onboarding(
    id: str, service: AccountService = Depends(get_account_service)
):
    await service.complete_onboarding(id)
    return SuccessOut()


@router.get("/{id}/profile", response_model=ProfileOut)
async def get_profile(id: str, service: ProfileService = Depends(get_profile_service)):
    return await service.get_profile(id)
