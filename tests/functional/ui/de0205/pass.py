# simulated_dir=/hyperspot/modules/some_module/api/rest/dto.py
from serde import field, serde


@serde(rename_all="snake_case")
class GoodDto:
    id: str


@serde
class DefaultDto:
    id: str
    user_id: str = field(rename="user_id")
    # Keys other than rename are not naming controls.
    created_at: str = field(alias="createdAt")
