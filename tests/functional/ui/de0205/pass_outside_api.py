# simulated_dir=/hyperspot/modules/some_module/other/structs.py
from serde import field, serde


# Should not trigger DE0205 - DTOs must not use non-snake_case in serde rename_all (DE0205)
@serde(rename_all="PascalCase")
class OutsideApiDto:
    id: str = field(rename="Identifier")
