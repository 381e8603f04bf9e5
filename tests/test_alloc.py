"""Tests for the allocation guard and its exhaustion policy."""

import pytest

from strarray import alloc
from strarray.alloc import (
    EXHAUSTED_MESSAGE,
    SLOT_SIZE,
    allocate,
    duplicate,
    reallocate,
    reallocate_slots,
    reserve,
    try_allocate,
    try_reallocate,
    try_reallocate_slots,
)
from strarray.array import StringArray
from strarray.config import AllocConfig, alloc_config_context
from strarray.errors import AllocationError
from strarray.joiner import join
from strarray.stringbuilder import StringBuilder

RECOVERABLE = AllocConfig(fatal_on_exhaustion=False, allocation_limit=64)


class TestAllocate:
    def test_minimum_size(self) -> None:
        assert len(allocate(0)) == 1
        assert len(allocate(-5)) == 1

    def test_zeroed(self) -> None:
        assert allocate(8) == bytearray(8)

    def test_fresh_blocks(self) -> None:
        assert allocate(4) is not allocate(4)


class TestReallocate:
    def test_grow_preserves_contents(self) -> None:
        block = reallocate(bytearray(b"abc"), 6)
        assert bytes(block) == b"abc\x00\x00\x00"

    def test_shrink_truncates(self) -> None:
        assert bytes(reallocate(bytearray(b"abcdef"), 2)) == b"ab"

    def test_none_allocates(self) -> None:
        assert len(reallocate(None, 10)) == 10

    def test_zero_size(self) -> None:
        assert reallocate(bytearray(b"abc"), 0) == bytearray()

    def test_slots_keep_identity(self) -> None:
        first = "".join(["a", "b"])
        slots = reallocate_slots([first, None], 4)
        assert len(slots) == 4
        assert slots[0] is first
        assert slots[1:] == [None, None, None]

    def test_slots_from_nothing(self) -> None:
        assert reallocate_slots(None, 16) == [None] * 16


class TestDuplicate:
    def test_equal_copy(self) -> None:
        assert duplicate("-lm") == "-lm"
        assert duplicate("") == ""

    def test_subclass_becomes_plain_str(self) -> None:
        class Tagged(str):
            pass

        copy = duplicate(Tagged("x"))
        assert type(copy) is str


class TestFatalPolicy:
    """Default policy: diagnostic on stderr, exit status 1."""

    def test_allocate_exits(self, capsys: pytest.CaptureFixture[str]) -> None:
        with alloc_config_context(AllocConfig(allocation_limit=8)):
            with pytest.raises(SystemExit) as exc_info:
                allocate(64)
        assert exc_info.value.code == 1
        assert capsys.readouterr().err == EXHAUSTED_MESSAGE

    def test_message_text(self) -> None:
        assert EXHAUSTED_MESSAGE == "Virtual memory exhausted.\n"

    def test_custom_exit_status(self) -> None:
        with alloc_config_context(AllocConfig(allocation_limit=8, exit_status=3)):
            with pytest.raises(SystemExit) as exc_info:
                reallocate(bytearray(4), 16)
        assert exc_info.value.code == 3

    def test_duplicate_exits(self) -> None:
        with alloc_config_context(AllocConfig(allocation_limit=4)):
            with pytest.raises(SystemExit):
                duplicate("too long")

    def test_runtime_memory_error(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        def exhausted(size: int) -> bytearray:
            raise MemoryError

        monkeypatch.setattr(alloc, "bytearray", exhausted, raising=False)
        with pytest.raises(SystemExit) as exc_info:
            allocate(16)
        assert exc_info.value.code == 1
        assert "Virtual memory exhausted." in capsys.readouterr().err

    def test_array_growth_exits(self, capsys: pytest.CaptureFixture[str]) -> None:
        array = StringArray()
        with alloc_config_context(AllocConfig(allocation_limit=16 * SLOT_SIZE)):
            for i in range(16):
                array.add(str(i))
            with pytest.raises(SystemExit):
                array.add("overflow")
        assert array.count == 16
        assert capsys.readouterr().err == EXHAUSTED_MESSAGE

    def test_failure_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with alloc_config_context(AllocConfig(allocation_limit=8)):
            with pytest.raises(SystemExit):
                allocate(64)
        assert "Allocation failed" in caplog.text


class TestRecoverablePolicy:
    """fatal_on_exhaustion=False and the try_* functions raise instead."""

    def test_allocate_raises(self, capsys: pytest.CaptureFixture[str]) -> None:
        with alloc_config_context(RECOVERABLE):
            with pytest.raises(AllocationError) as exc_info:
                allocate(65)
        assert exc_info.value.requested == 65
        assert exc_info.value.limit == 64
        assert capsys.readouterr().err == ""

    def test_is_memory_error(self) -> None:
        with alloc_config_context(RECOVERABLE):
            with pytest.raises(MemoryError):
                reallocate(None, 128)

    def test_try_functions_ignore_fatal_policy(self) -> None:
        with alloc_config_context(AllocConfig(allocation_limit=8)):
            with pytest.raises(AllocationError):
                try_allocate(9)
            with pytest.raises(AllocationError):
                try_reallocate(bytearray(1), 9)
            with pytest.raises(AllocationError):
                try_reallocate_slots(None, 4)

    def test_within_limit(self) -> None:
        with alloc_config_context(RECOVERABLE):
            assert len(allocate(64)) == 64

    def test_array_growth_raises(self) -> None:
        array = StringArray()
        with alloc_config_context(AllocConfig(fatal_on_exhaustion=False, allocation_limit=0)):
            with pytest.raises(AllocationError):
                array.add("x")
        assert array.count == 0
        assert array.capacity == 0


class TestReserve:
    """reserve() guards storage that Python builds itself."""

    def test_within_limit(self) -> None:
        with alloc_config_context(RECOVERABLE):
            with reserve(64):
                result = "x" * 63
        assert len(result) == 63

    def test_over_limit_exits(self, capsys: pytest.CaptureFixture[str]) -> None:
        with alloc_config_context(AllocConfig(allocation_limit=8)):
            with pytest.raises(SystemExit) as exc_info:
                with reserve(9):
                    pass
        assert exc_info.value.code == 1
        assert capsys.readouterr().err == EXHAUSTED_MESSAGE

    def test_memory_error_in_block_exits(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit):
            with reserve(16):
                raise MemoryError
        assert capsys.readouterr().err == EXHAUSTED_MESSAGE

    def test_memory_error_in_block_recoverable(self) -> None:
        with alloc_config_context(AllocConfig(fatal_on_exhaustion=False)):
            with pytest.raises(AllocationError) as exc_info:
                with reserve(16):
                    raise MemoryError
        assert exc_info.value.requested == 16

    def test_other_errors_pass_through(self) -> None:
        with pytest.raises(ValueError):
            with reserve(1):
                raise ValueError("unrelated")


class TestGuardedJoinAndCopy:
    """join() and StringArray.copy() are subject to the exhaustion policy."""

    def test_join_over_limit_exits(self, capsys: pytest.CaptureFixture[str]) -> None:
        with alloc_config_context(AllocConfig(allocation_limit=8)):
            with pytest.raises(SystemExit) as exc_info:
                join(["x" * 16, "y" * 16], ",")
        assert exc_info.value.code == 1
        assert capsys.readouterr().err == EXHAUSTED_MESSAGE

    def test_join_over_limit_recoverable(self) -> None:
        with alloc_config_context(AllocConfig(fatal_on_exhaustion=False, allocation_limit=8)):
            with pytest.raises(AllocationError) as exc_info:
                join(["x" * 16, "y" * 16], ",")
        assert exc_info.value.requested == 34

    def test_join_accounts_exact_length(self) -> None:
        # "ab,cd" plus terminator is 6
        with alloc_config_context(AllocConfig(fatal_on_exhaustion=False, allocation_limit=6)):
            assert join(["ab", "cd"], ",") == "ab,cd"
        with alloc_config_context(AllocConfig(fatal_on_exhaustion=False, allocation_limit=5)):
            with pytest.raises(AllocationError):
                join(["ab", "cd"], ",")

    def test_join_runtime_memory_error_exits(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        def exhausted(self: StringBuilder) -> str:
            raise MemoryError

        monkeypatch.setattr(StringBuilder, "build", exhausted)
        with pytest.raises(SystemExit) as exc_info:
            join(["a", "b"], ",")
        assert exc_info.value.code == 1
        assert capsys.readouterr().err == EXHAUSTED_MESSAGE

    def test_copy_over_limit_exits(self, capsys: pytest.CaptureFixture[str]) -> None:
        array = StringArray.from_iterable(["a"])
        with alloc_config_context(AllocConfig(allocation_limit=8)):
            with pytest.raises(SystemExit):
                array.copy()
        assert capsys.readouterr().err == EXHAUSTED_MESSAGE

    def test_copy_over_limit_recoverable(self) -> None:
        array = StringArray.from_iterable(["a"])
        with alloc_config_context(AllocConfig(fatal_on_exhaustion=False, allocation_limit=8)):
            with pytest.raises(AllocationError) as exc_info:
                array.copy()
        assert exc_info.value.requested == 16 * SLOT_SIZE

    def test_copy_uses_slot_allocator(self, monkeypatch: pytest.MonkeyPatch) -> None:
        sizes: list[int] = []
        real = alloc.reallocate_slots

        def counting(slots, size):
            sizes.append(size)
            return real(slots, size)

        array = StringArray.from_iterable(["a", "b"])
        monkeypatch.setattr(alloc, "reallocate_slots", counting)
        clone = array.copy()
        assert sizes == [16]
        assert clone == ["a", "b"]

    def test_copy_of_empty_allocates_nothing(self) -> None:
        with alloc_config_context(AllocConfig(allocation_limit=0)):
            assert StringArray().copy() == []
