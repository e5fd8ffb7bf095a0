"""Concurrent registration and validation."""
import threading
from dataclasses import dataclass

from tagvalidator.core.errors import ErrorCode
from tagvalidator.validation import tag


@dataclass
class Contact:
    email: str = tag("required,email", default="")


def test_validations_run_while_registering(validator):
    failures = []
    start = threading.Barrier(5)

    def validate():
        start.wait()
        for _ in range(200):
            if not validator.validate_struct(Contact("a@example.com")).valid:
                failures.append("unexpected failure")

    def register():
        start.wait()
        for i in range(200):
            validator.add_custom_type_tag_fn(f"rule{i}", lambda ctx, value, root: True)

    threads = [threading.Thread(target=validate) for _ in range(4)] + [threading.Thread(target=register)]
    for t in threads: t.start()
    for t in threads: t.join()

    assert failures == []
    assert all(f"rule{i}" in validator.registry.custom_snapshot() for i in range(200))


def test_concurrent_registrations_are_all_kept(validator):
    def register(offset):
        for i in range(100):
            validator.add_custom_type_tag_fn(f"t{offset}_{i}", lambda ctx, value, root: True)

    threads = [threading.Thread(target=register, args=(n,)) for n in range(4)]
    for t in threads: t.start()
    for t in threads: t.join()

    assert len(validator.registry.custom_snapshot()) == 400


def test_each_call_uses_one_snapshot(validator):
    @dataclass
    class Form:
        first: str = tag("registrar", default="")
        second: str = tag("late", default="")

    def registrar(ctx, value, root):
        validator.add_custom_type_tag_fn("late", lambda ctx, value, root: True)
        return True

    validator.add_custom_type_tag_fn("registrar", registrar)

    (error,) = validator.validate_struct(Form("x", "y")).errors
    assert error.path == "second"
    assert error.code is ErrorCode.E8001_UNKNOWN_RULE

    assert validator.validate_struct(Form("x", "y")).valid
