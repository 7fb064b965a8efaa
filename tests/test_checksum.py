import hashlib

from app.core.security import compute_checksum, verify_checksum
from app.schemas.paygate import NotifyPayload, ReturnPayload

NOTIFY_FIELDS = {
    "PAYGATE_ID": "M1",
    "PAY_REQUEST_ID": "R1",
    "REFERENCE": "REF1",
    "TRANSACTION_STATUS": "1",
    "RESULT_CODE": "990017",
    "AUTH_CODE": "A1",
    "AMOUNT": "1000",
    "RESULT_DESC": "Auth Done",
    "TRANSACTION_ID": "T1",
    "TRANSACTION_DATE": "2024-01-01 10:00:00",
}


def test_compute_checksum_is_md5_of_concatenation_plus_secret():
    expected = hashlib.md5("abcS".encode("utf-8")).hexdigest()
    assert compute_checksum(["a", "b", "c"], "S") == expected == "c4449120506d97975c67be69719a78e2"


def test_checksum_is_lowercase_hex_of_32_chars():
    checksum = compute_checksum(["Hello", "World"], "Key")
    assert len(checksum) == 32
    assert checksum == checksum.lower()


def test_notify_golden_vector():
    payload = NotifyPayload.model_validate(NOTIFY_FIELDS)
    assert compute_checksum(payload.checksum_fields(), "S") == "2c5ee2b1fa4f5e35d08275dfbf4541ce"


def test_return_checksum_uses_configured_merchant_id():
    payload = ReturnPayload.model_validate({
        "PAY_REQUEST_ID": "R1",
        "TRANSACTION_STATUS": "1",
        "REFERENCE": "REF1",
        "TRANSACTION_ID": "T1",
    })
    assert compute_checksum(payload.checksum_fields("M1"), "S") == "5d47a52f1f5069b7c082484170aeca14"


def test_verify_accepts_own_checksum():
    fields = list(NOTIFY_FIELDS.values())
    assert verify_checksum(fields, "S", compute_checksum(fields, "S"))


def test_single_character_mutation_breaks_verification():
    fields = list(NOTIFY_FIELDS.values())
    checksum = compute_checksum(fields, "S")

    for index, value in enumerate(fields):
        mutated = list(fields)
        mutated[index] = value + "x"
        assert not verify_checksum(mutated, "S", checksum)

    assert not verify_checksum(fields, "T", checksum)


def test_field_order_changes_checksum():
    assert compute_checksum(["a", "b"], "S") == "95b97853710a55811b0d6f532976d1f7"
    assert compute_checksum(["b", "a"], "S") == "c53adfe84ae05c0629869cf9b2f2a4ad"


def test_verify_is_case_sensitive_and_rejects_missing_candidate():
    fields = ["a", "b", "c"]
    checksum = compute_checksum(fields, "S")
    assert not verify_checksum(fields, "S", checksum.upper())
    assert not verify_checksum(fields, "S", None)
    assert not verify_checksum(fields, "S", "")


def test_absent_callback_fields_contribute_nothing():
    payload = NotifyPayload.model_validate({"PAYGATE_ID": "M1", "REFERENCE": "REF1"})
    fields = payload.checksum_fields()
    assert len(fields) == 10
    assert "".join(fields) == "M1REF1"
    assert compute_checksum(fields, "S") == compute_checksum(["M1REF1"], "S")
