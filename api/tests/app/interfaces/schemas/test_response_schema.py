from app.interfaces.schemas.base import Response
from app.interfaces.schemas.user import UserListResponse


def test_fail_response_can_be_used_with_typed_response_model() -> None:
    """失败响应不应因为 data 结构与业务成功模型不同而触发校验异常。"""
    response = Response[UserListResponse](code=404, msg="用户不存在", data=None)

    assert response.code == 404
    assert response.msg == "用户不存在"
    assert response.data is None


def test_success_response_wraps_user_list() -> None:
    response = Response.success(data=UserListResponse(total=0))

    assert response.code == 200
    assert response.msg == "success"
    assert response.data.users == []


def test_fail_response_defaults_data_to_empty_object() -> None:
    assert Response.fail(code=409, msg="邮箱已被注册") == {
        "code": 409,
        "msg": "邮箱已被注册",
        "data": {},
    }
