"""
Operation catalogue

Each RPC method declares which caller fields are required, which go into
Data and which go into Data.Attributes.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from trustly_client.exceptions import DataError


@dataclass(frozen=True)
class Operation:
    name: str
    required: Tuple[str, ...]
    data: Tuple[str, ...]
    attributes: Tuple[str, ...] = ()

    def missing_fields(self, options: Dict[str, Any]) -> List[str]:
        """Required fields that are absent or None, in declared order"""
        return [field for field in self.required if options.get(field) is None]

    def check_required(self, options: Dict[str, Any]) -> None:
        missing = self.missing_fields(options)
        if missing:
            raise DataError(f"Required data is missing: {'; '.join(missing)}")

    def select_data(self, options: Dict[str, Any]) -> Dict[str, Any]:
        return {field: options[field] for field in self.data if field in options}

    def select_attributes(self, options: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        if not self.attributes:
            return None
        return {field: options[field] for field in self.attributes if field in options}


VOID = Operation(
    name="Void",
    required=("OrderId",),
    data=("OrderId",),
)

DEPOSIT = Operation(
    name="Deposit",
    required=(
        "Locale", "Country", "Currency", "SuccessURL", "FailURL",
        "NotificationURL", "Amount", "EndUserID", "MessageID", "Firstname",
        "Lastname", "ShopperStatement",
    ),
    data=("NotificationURL", "EndUserID", "MessageID"),
    attributes=(
        "Locale", "Country", "Currency", "SuggestedMinAmount",
        "SuggestedMaxAmount", "Amount", "IP", "SuccessURL", "FailURL",
        "TemplateURL", "URLTarget", "MobilePhone", "ShopperStatement",
        "Firstname", "Lastname", "NationalIdentificationNumber", "Email",
        "AccountID", "UnchangeableNationalIdentificationNumber",
        "ShippingAddressCountry", "ShippingAddressPostalCode",
        "ShippingAddressLine1", "ShippingAddressLine2", "ShippingAddress",
        "RequestDirectDebitMandate", "ChargeAccountID", "QuickDeposit",
        "URLScheme", "ExternalReference", "PSPMerchant", "PSPMerchantURL",
        "MerchantCategoryCode", "RecipientInformation",
    ),
)

REFUND = Operation(
    name="Refund",
    required=("OrderId", "Amount", "Currency"),
    data=("OrderId", "Amount", "Currency"),
    attributes=("ExternalReference",),
)

SELECT_ACCOUNT = Operation(
    name="SelectAccount",
    required=(
        "Locale", "Country", "SuccessURL", "FailURL", "NotificationURL",
        "EndUserID", "MessageID", "Firstname", "Lastname",
    ),
    data=("NotificationURL", "EndUserID", "MessageID"),
    attributes=(
        "Locale", "Country", "Firstname", "Lastname", "SuccessURL", "FailURL",
        "Email", "IP", "RequestDirectDebitMandate", "TemplateURL", "URLTarget",
        "MobilePhone", "NationalIdentificationNumber",
        "UnchangeableNationalIdentificationNumber", "ShopperStatement",
        "DateOfBirth", "URLScheme", "PSPMerchant", "PSPMerchantURL",
        "MerchantCategoryCode",
    ),
)

ACCOUNT_PAYOUT = Operation(
    name="AccountPayout",
    required=(
        "NotificationURL", "AccountID", "EndUserID", "MessageID", "Amount",
        "Currency", "ShopperStatement",
    ),
    data=("NotificationURL", "AccountID", "EndUserID", "MessageID", "Amount", "Currency"),
    attributes=(
        "ShopperStatement", "PSPMerchant", "PSPMerchantURL",
        "ExternalReference", "MerchantCategoryCode", "SenderInformation",
    ),
)

REGISTER_ACCOUNT = Operation(
    name="RegisterAccount",
    required=("EndUserID", "ClearingHouse", "BankNumber", "AccountNumber", "Firstname", "Lastname"),
    data=("EndUserID", "ClearingHouse", "BankNumber", "AccountNumber", "Firstname", "Lastname"),
    attributes=(
        "DateOfBirth", "MobilePhone", "NationalIdentificationNumber",
        "AddressCountry", "AddressPostalCode", "AddressCity", "AddressLine1",
        "AddressLine2", "Address", "Email",
    ),
)

GET_WITHDRAWALS = Operation(
    name="GetWithdrawals",
    required=("OrderId",),
    data=("OrderId",),
)

OPERATIONS: Dict[str, Operation] = {
    operation.name: operation
    for operation in (
        VOID, DEPOSIT, REFUND, SELECT_ACCOUNT, ACCOUNT_PAYOUT,
        REGISTER_ACCOUNT, GET_WITHDRAWALS,
    )
}
