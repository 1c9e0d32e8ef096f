import threading

from chequetrack.services.outbox import BestEffortOutbox

from conftest import RecordingSender


def test_operations_are_sent_in_order():
    sender = RecordingSender()
    outbox = BestEffortOutbox(sender)

    for i in range(20):
        outbox.enqueue("SAVE_CHEQUE", {"n": i})

    assert outbox.flush(timeout=5)
    assert [p["n"] for _, p in sender.calls] == list(range(20))
    outbox.close()


def test_failure_is_reported_and_not_retried():
    attempts = []
    failures = []

    def failing_sender(action, payload):
        attempts.append(action)
        if action == "BAD":
            raise ConnectionError("endpoint down")

    outbox = BestEffortOutbox(failing_sender, on_failure=lambda a, p, e: failures.append((a, str(e))))
    outbox.enqueue("BAD", {})
    outbox.enqueue("GOOD", {})

    assert outbox.flush(timeout=5)
    assert attempts == ["BAD", "GOOD"]
    assert failures == [("BAD", "endpoint down")]
    outbox.close()


def test_raising_observer_does_not_stop_the_worker():
    sender_calls = []

    def sender(action, payload):
        sender_calls.append(action)
        raise RuntimeError("boom")

    def observer(action, payload, exc):
        raise ValueError("observer broke")

    outbox = BestEffortOutbox(sender, on_failure=observer)
    outbox.enqueue("ONE", {})
    outbox.enqueue("TWO", {})

    assert outbox.flush(timeout=5)
    assert sender_calls == ["ONE", "TWO"]
    outbox.close()


def test_enqueue_does_not_wait_for_delivery():
    release = threading.Event()
    sender = RecordingSender()

    def slow_sender(action, payload):
        release.wait(5)
        sender(action, payload)

    outbox = BestEffortOutbox(slow_sender)
    outbox.enqueue("SAVE_BRANCH", {})

    assert sender.calls == []
    assert outbox.flush(timeout=0.05) is False
    release.set()
    assert outbox.flush(timeout=5)
    assert sender.actions() == ["SAVE_BRANCH"]
    outbox.close()


def test_closed_outbox_drops_new_operations():
    sender = RecordingSender()
    outbox = BestEffortOutbox(sender)
    outbox.enqueue("FIRST", {})
    outbox.close()

    outbox.enqueue("LATE", {})

    assert sender.actions() == ["FIRST"]
