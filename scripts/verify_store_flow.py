"""Verify the ledger round trip against a live bucket: submit -> resync in a fresh ledger -> delete.

Reads the same S3_* / AWS_* settings as the service, so point it at MinIO in
development. Uses a dedicated record prefix to stay clear of real records.
"""

from fraudnet.config import settings
from fraudnet.domains.ledger.config import LedgerConfig
from fraudnet.domains.ledger.ledger import FraudLedger
from fraudnet.domains.ledger.models import FraudQuery, FraudSubmission
from fraudnet.persistence.storage import FraudRecordStore
from fraudnet.shared.hashing import hash_value
from fraudnet.shared.timestamps import utc_now_iso

CONFIG = LedgerConfig(record_prefix="verify-script/fraud-records")


def make_submission(marker: str) -> FraudSubmission:
    return FraudSubmission(
        bank_id="verify-script",
        device_id_hash=hash_value(f"device-{marker}"),
        account_id_hash=hash_value(f"account-{marker}"),
        transaction_pattern_hash=hash_value({"marker": marker}),
        fraud_type="verification",
        timestamp=utc_now_iso(),
        severity="low",
    )


def main() -> None:
    store = FraudRecordStore.from_settings(settings)
    if not store.check_connection():
        print(f"  [FAIL] bucket {store.bucket} is not reachable")
        raise SystemExit(1)
    print(f"  [PASS] bucket {store.bucket} reachable")

    writer = FraudLedger(store=store, config=CONFIG)
    submission = make_submission(utc_now_iso())
    result = writer.submit(submission)
    print(f"  Submitted {result.fraud_id}")

    # A second ledger starts empty and must see the record only through the store
    reader = FraudLedger(store=store, config=CONFIG)
    found = reader.query(FraudQuery(device_id_hash=submission.device_id_hash)).found
    print(f"  [{'PASS' if found else 'FAIL'}] record visible to a fresh ledger after resync")

    deleted = reader.delete_record(result.fraud_id)
    print(f"  [{'PASS' if deleted else 'FAIL'}] record deleted")

    if not (found and deleted):
        raise SystemExit(1)
    print("\n  Ledger round trip through the store works!")


if __name__ == "__main__":
    main()
