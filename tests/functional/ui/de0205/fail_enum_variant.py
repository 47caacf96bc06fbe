# simulated_dir=/hyperspot/modules/some_module/api/rest/events.py
from enum import Enum

from serde import field, serde


# Should trigger DE0205 - DTOs must not use non-snake_case in serde rename_all
@serde(rename_all="camelCase")
class UserEvent(Enum):
    # Should trigger DE0205 - DTOs must not use non-snake_case in serde rename_all
    @serde(rename_all="PascalCase")
    class Created:
        # Should trigger DE0205 - DTO fields must not use non-snake_case in serde rename
        user_id: str = field(rename="userId")

    @serde(rename_all="snake_case")
    class Deleted:
        user_id: str = field(rename="user_id")
