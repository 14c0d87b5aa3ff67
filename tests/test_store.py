"""
Tests for the in-memory log store and the ingest use case.
"""

import threading

import pytest
from dateutil.parser import isoparse

from logingest import ingest_structured_events, ingest_unstructured
from logingest.application.ingest_logs import IngestLogsUseCase
from logingest.config import IngestSettings
from logingest.core.exceptions import StoreCorruptedError
from logingest.domain.entities import (
    Log,
    UnstructuredEntry,
    UnstructuredSubmission,
)
from logingest.normalization.timestamps import EpochUnit
from logingest.store.memory import LogStore


def _log(text: str, customer: str = "acme") -> Log:
    return Log(customer_id=customer, log_type="auth", log_text=text, ts_rfc3339="2024-01-01T00:00:00Z")


class _FailingList(list):
    """List whose extend stores part of the batch and then fails."""

    def extend(self, items):
        super().extend(list(items)[:1])
        raise MemoryError("simulated failure")


class TestLogStore:
    """Tests for LogStore."""

    def test_empty(self, store):
        assert len(store) == 0
        assert store.snapshot() == []
        assert not store.corrupted

    def test_extend_preserves_order(self, store):
        """Test batches are appended in order."""
        store.extend([_log("a"), _log("b")])
        store.extend([_log("c")])

        assert [log.log_text for log in store.snapshot()] == ["a", "b", "c"]
        assert len(store) == 3

    def test_extend_accepts_iterables(self, store):
        store.extend(_log(t) for t in "xyz")
        assert len(store) == 3

    def test_snapshot_is_a_copy(self, store):
        """Test mutating a snapshot does not touch the store."""
        store.extend([_log("a")])
        snapshot = store.snapshot()
        snapshot.clear()

        assert len(store) == 1

    def test_failed_append_corrupts_store(self, store):
        """Test a failure inside the critical section is fatal."""
        store.extend([_log("kept")])
        store._logs = _FailingList(store._logs)

        with pytest.raises(MemoryError):
            store.extend([_log("a"), _log("b")])

        assert store.corrupted
        # Partial batch is rolled back
        assert [log.log_text for log in store._logs] == ["kept"]

        with pytest.raises(StoreCorruptedError) as exc_info:
            store.snapshot()
        assert exc_info.value.fatal
        with pytest.raises(StoreCorruptedError):
            store.extend([_log("c")])
        with pytest.raises(StoreCorruptedError):
            len(store)

    def test_concurrent_extend(self, store):
        """Test concurrent batches are all stored without interleaving."""
        threads_count = 16
        batch_size = 200
        barrier = threading.Barrier(threads_count)

        def worker(n: int) -> None:
            batch = [_log(f"{n}-{i}", customer=f"customer-{n}") for i in range(batch_size)]
            barrier.wait()
            store.extend(batch)

        threads = [threading.Thread(target=worker, args=(n,)) for n in range(threads_count)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        logs = store.snapshot()
        assert len(logs) == threads_count * batch_size

        seen = set()
        for start in range(0, len(logs), batch_size):
            chunk = logs[start:start + batch_size]
            customer = chunk[0].customer_id
            n = customer.split("-")[1]
            assert [log.log_text for log in chunk] == [f"{n}-{i}" for i in range(batch_size)]
            assert all(log.customer_id == customer for log in chunk)
            seen.add(customer)

        assert len(seen) == threads_count


class TestIngestLogsUseCase:
    """Tests for IngestLogsUseCase."""

    def test_ingest_unstructured(self, store, unstructured_submission, fixed_clock):
        """Test unstructured submissions land in the store."""
        use_case = IngestLogsUseCase(store, clock=fixed_clock)
        use_case.ingest_unstructured(unstructured_submission)

        logs = store.snapshot()
        assert len(logs) == 3
        assert logs[2].ts_rfc3339 == "2026-01-27T10:15:32+00:00"

    def test_ingest_structured_events(self, store, event_submission):
        """Test structured events land in the store with empty text."""
        IngestLogsUseCase(store).ingest_structured_events(event_submission)

        logs = store.snapshot()
        assert [log.log_type for log in logs] == ["GCP_DNS", "OKTA", "CS_EDR"]
        assert all(log.log_text == "" for log in logs)

    def test_mixed_submissions_accumulate(self, store, unstructured_submission, event_submission):
        use_case = IngestLogsUseCase(store)
        use_case.ingest_unstructured(unstructured_submission)
        use_case.ingest_structured_events(event_submission)

        logs = store.snapshot()
        assert len(logs) == 6
        assert logs[0].log_type == "nginx"
        assert logs[3].log_type == "GCP_DNS"

    def test_settings_epoch_unit(self, store):
        """Test the configured epoch unit is applied."""
        settings = IngestSettings(epoch_unit=EpochUnit.MICROSECONDS)
        sub = UnstructuredSubmission(
            customer_id="acme",
            log_type="auth",
            entries=[UnstructuredEntry(log_text="x", ts_epoch_microseconds=1704067200000000)],
        )
        IngestLogsUseCase(store, settings).ingest_unstructured(sub)

        assert store.snapshot()[0].ts_rfc3339 == "2024-01-01T00:00:00+00:00"

    def test_corrupted_store_rejects_ingest(self, store, unstructured_submission):
        store._corrupted = True
        with pytest.raises(StoreCorruptedError):
            IngestLogsUseCase(store).ingest_unstructured(unstructured_submission)

    def test_concurrent_ingest(self, store):
        """Test N submissions of M entries from N threads yield N*M logs."""
        submissions_count = 8
        entries_count = 50
        use_case = IngestLogsUseCase(store)
        barrier = threading.Barrier(submissions_count)

        def worker(n: int) -> None:
            sub = UnstructuredSubmission(
                customer_id=f"customer-{n}",
                log_type="auth",
                entries=[UnstructuredEntry(log_text=str(i)) for i in range(entries_count)],
            )
            barrier.wait()
            use_case.ingest_unstructured(sub)

        threads = [threading.Thread(target=worker, args=(n,)) for n in range(submissions_count)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        logs = store.snapshot()
        assert len(logs) == submissions_count * entries_count
        for start in range(0, len(logs), entries_count):
            chunk = logs[start:start + entries_count]
            assert len({log.customer_id for log in chunk}) == 1
            assert [log.log_text for log in chunk] == [str(i) for i in range(entries_count)]
            assert all(isoparse(log.ts_rfc3339) for log in chunk)


class TestConvenienceFunctions:
    """Tests for the package-level ingest helpers."""

    def test_ingest_unstructured(self, store, unstructured_payload):
        ingest_unstructured(store, UnstructuredSubmission.from_dict(unstructured_payload))
        assert [log.log_text for log in store.snapshot()] == ["login ok", "login fail"]

    def test_ingest_structured_events(self, store, event_submission):
        ingest_structured_events(store, event_submission)
        assert len(store) == 3
