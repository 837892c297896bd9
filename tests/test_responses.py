from accrual_mock.responses import OrderAccrualResult, accrual_result, no_content


def test_result_defaults():
    result = OrderAccrualResult(order="15")
    assert result.status == "PROCESSED"
    assert result.accrual == 1000


def test_to_dict_key_order():
    assert list(OrderAccrualResult(order="1").to_dict()) == ["order", "status", "accrual"]


def test_accrual_result_is_compact_json():
    response = accrual_result("3")
    assert response.status_code == 200
    assert response.media_type == "application/json"
    assert response.body == b'{"order":"3","status":"PROCESSED","accrual":1000}'


def test_no_content_is_empty():
    response = no_content()
    assert response.status_code == 204
    assert response.body == b""
