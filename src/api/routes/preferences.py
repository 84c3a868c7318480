"""User preference routes."""

from fastapi import APIRouter, Depends

from src.api.deps import get_preference_store
from src.api.schemas import PreferencesResponse, PreferencesUpdate
from src.data.preferences import PreferenceStore
from src.models.preferences import UserPreferences

router = APIRouter(prefix="/api/v1/preferences", tags=["preferences"])


def _to_response(prefs: UserPreferences) -> PreferencesResponse:
    return PreferencesResponse(
        locale=prefs.locale,
        theme=prefs.theme,
        default_currency=prefs.default_currency,
        display_name=prefs.display_name,
        avatar_url=prefs.avatar_url,
    )


@router.get("", response_model=PreferencesResponse)
async def get_preferences(store: PreferenceStore = Depends(get_preference_store)):
    return _to_response(store.load())


@router.put("", response_model=PreferencesResponse)
async def update_preferences(
    req: PreferencesUpdate,
    store: PreferenceStore = Depends(get_preference_store),
):
    changes = req.model_dump(exclude_none=True)
    return _to_response(store.update(**changes))
