from http import HTTPStatus as StatusCode

from modkit.api import OperationBuilder


def register_users(router, openapi):
    return (
        OperationBuilder.get("/users-info/v1/users")
        .operation_id("users_info.list_users")
        .handler(list_users)
        .require_auth(Resource, Action)
        .json_response(StatusCode.OK, "Success")
        # Should trigger DE0804 - API endpoint missing required summary
        .register(router, openapi)
    )
