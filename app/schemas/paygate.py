from enum import Enum
from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class PaymentRequest(BaseModel):
    reference: str
    amount_cents: int = Field(ge=1)
    currency: Literal["ZAR"] = "ZAR"
    email: str = ""
    user1_tag: str


class InitiatePayload(BaseModel):
    """PayWeb3 initiate request. Field declaration order is the wire order."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    paygate_id: str = Field(alias="PAYGATE_ID")
    reference: str = Field(alias="REFERENCE")
    amount: str = Field(alias="AMOUNT")
    currency: str = Field(alias="CURRENCY")
    return_url: str = Field(alias="RETURN_URL")
    transaction_date: str = Field(alias="TRANSACTION_DATE")
    locale: str = Field(alias="LOCALE")
    country: str = Field(alias="COUNTRY")
    email: str = Field("", alias="EMAIL")
    pay_method: str = Field("", alias="PAY_METHOD")
    pay_method_detail: str = Field("", alias="PAY_METHOD_DETAIL")
    notify_url: str = Field(alias="NOTIFY_URL")
    user1: str = Field("", alias="USER1")
    user2: str = Field("", alias="USER2")
    user3: str = Field("", alias="USER3")
    vault: str = Field("", alias="VAULT")
    vault_id: str = Field("", alias="VAULT_ID")
    checksum: str = Field("", alias="CHECKSUM")

    def checksum_fields(self) -> List[str]:
        return [
            self.paygate_id,
            self.reference,
            self.amount,
            self.currency,
            self.return_url,
            self.transaction_date,
            self.locale,
            self.country,
            self.email,
            self.pay_method,
            self.pay_method_detail,
            self.notify_url,
            self.user1,
            self.user2,
            self.user3,
            self.vault,
            self.vault_id,
        ]

    def as_form(self) -> Dict[str, str]:
        return self.model_dump(by_alias=True)


class GatewayResponse(BaseModel):
    data: Dict[str, str] = {}

    @property
    def pay_request_id(self) -> str:
        return self.data.get("PAY_REQUEST_ID", "")

    @property
    def checksum(self) -> str:
        return self.data.get("CHECKSUM", "")

    @property
    def error(self) -> Optional[str]:
        return self.data.get("ERROR")

    @property
    def is_valid(self) -> bool:
        return bool(self.pay_request_id and self.checksum)


class ReturnPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore", coerce_numbers_to_str=True)

    pay_request_id: Optional[str] = Field(None, alias="PAY_REQUEST_ID")
    transaction_status: Optional[str] = Field(None, alias="TRANSACTION_STATUS")
    reference: Optional[str] = Field(None, alias="REFERENCE")
    transaction_id: Optional[str] = Field(None, alias="TRANSACTION_ID")
    checksum: Optional[str] = Field(None, alias="CHECKSUM")

    def checksum_fields(self, paygate_id: str) -> List[str]:
        return [
            paygate_id,
            self.pay_request_id or "",
            self.transaction_status or "",
            self.reference or "",
        ]


class NotifyPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore", coerce_numbers_to_str=True)

    paygate_id: Optional[str] = Field(None, alias="PAYGATE_ID")
    pay_request_id: Optional[str] = Field(None, alias="PAY_REQUEST_ID")
    reference: Optional[str] = Field(None, alias="REFERENCE")
    transaction_status: Optional[str] = Field(None, alias="TRANSACTION_STATUS")
    transaction_id: Optional[str] = Field(None, alias="TRANSACTION_ID")
    result_code: Optional[str] = Field(None, alias="RESULT_CODE")
    auth_code: Optional[str] = Field(None, alias="AUTH_CODE")
    amount: Optional[str] = Field(None, alias="AMOUNT")
    result_desc: Optional[str] = Field(None, alias="RESULT_DESC")
    transaction_date: Optional[str] = Field(None, alias="TRANSACTION_DATE")
    checksum: Optional[str] = Field(None, alias="CHECKSUM")

    def checksum_fields(self) -> List[str]:
        # Not the same order as the return redirect
        return [
            self.paygate_id or "",
            self.pay_request_id or "",
            self.reference or "",
            self.transaction_status or "",
            self.result_code or "",
            self.auth_code or "",
            self.amount or "",
            self.result_desc or "",
            self.transaction_id or "",
            self.transaction_date or "",
        ]


class TransactionStatus(str, Enum):
    APPROVED = "APPROVED"
    DECLINED = "DECLINED"
    PENDING = "PENDING"

    @classmethod
    def from_code(cls, code: Optional[str]) -> "TransactionStatus":
        if code == "1":
            return cls.APPROVED
        if code == "2":
            return cls.DECLINED
        # 0 and 4 are pending; unknown codes fall back to pending too
        return cls.PENDING
