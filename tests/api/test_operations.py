"""
Tests for the operation catalogue
"""
import pytest

from trustly_client.api.operations import OPERATIONS, REFUND, VOID
from trustly_client.exceptions import DataError


def test_catalogue_names():
    """Test every supported operation is registered"""
    assert set(OPERATIONS) == {
        "Void", "Deposit", "Refund", "SelectAccount", "AccountPayout",
        "RegisterAccount", "GetWithdrawals",
    }


@pytest.mark.parametrize("operation", list(OPERATIONS.values()), ids=lambda op: op.name)
def test_required_fields_are_sent(operation):
    """Test every required field ends up in Data or Attributes"""
    for field in operation.required:
        assert field in operation.data or field in operation.attributes


def test_missing_fields_in_declared_order():
    """Test missing fields keep the declared order"""
    assert REFUND.missing_fields({"Amount": 100}) == ["OrderId", "Currency"]


def test_none_counts_as_missing():
    """Test None values are treated as missing"""
    assert VOID.missing_fields({"OrderId": None}) == ["OrderId"]


def test_check_required_message():
    """Test the error message joins fields with semicolons"""
    with pytest.raises(DataError) as exc_info:
        REFUND.check_required({"Amount": 100})
    assert str(exc_info.value) == "Required data is missing: OrderId; Currency"


def test_select_data_and_attributes():
    """Test caller fields are split into Data and Attributes"""
    options = {"OrderId": "1", "Amount": 100, "Currency": "EUR", "ExternalReference": "x", "Other": 1}
    assert REFUND.select_data(options) == {"OrderId": "1", "Amount": 100, "Currency": "EUR"}
    assert REFUND.select_attributes(options) == {"ExternalReference": "x"}


def test_select_attributes_without_declared_attributes():
    """Test operations without attributes produce None"""
    assert VOID.select_attributes({"OrderId": "1"}) is None
