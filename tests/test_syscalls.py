import errno
import time

import pytest

from randolib import syscalls
from randolib.syscalls import (
    current_time,
    force_large_file,
    mmap2_page_offset,
    open_mode,
)


def test_mmap2_zero_offset():
    assert mmap2_page_offset(0) == 0


@pytest.mark.parametrize("pages", [1, 2, 3, 17, 1024])
def test_mmap2_aligned_offsets_round_trip(pages):
    assert mmap2_page_offset(pages * syscalls.MMAP2_PAGE_SIZE) == pages


def test_mmap2_page_size_is_4096():
    assert mmap2_page_offset(4096) == 1


@pytest.mark.parametrize("offset", [-1, -4096, 1, 100, 4095, 4097])
def test_mmap2_rejects_bad_offsets(offset):
    with pytest.raises(OSError) as info:
        mmap2_page_offset(offset)
    assert info.value.errno == errno.EINVAL


@pytest.mark.parametrize("flags", [0, syscalls.O_CREAT, syscalls.CREAT_FLAGS])
def test_force_large_file_lp64_unchanged(flags):
    assert force_large_file(flags, True) == flags


@pytest.mark.parametrize("flags", [0, syscalls.O_CREAT, syscalls.CREAT_FLAGS])
def test_force_large_file_32bit_adds_flag(flags):
    result = force_large_file(flags, False)
    assert result & syscalls.O_LARGEFILE == syscalls.O_LARGEFILE
    assert result & ~syscalls.O_LARGEFILE == flags & ~syscalls.O_LARGEFILE


def test_force_large_file_idempotent():
    once = force_large_file(syscalls.O_CREAT, False)
    assert force_large_file(once, False) == once


def test_open_mode_with_creat_keeps_mode():
    assert open_mode(syscalls.O_CREAT, 0o644) == 0o644


def test_open_mode_creat_flags_keep_mode():
    assert open_mode(syscalls.CREAT_FLAGS, 0o600) == 0o600


def test_open_mode_without_creat_is_zero():
    assert open_mode(0, 0o644) == 0


def test_current_time_matches_clock():
    before = int(time.time())
    now = current_time()
    after = int(time.time())
    assert before <= now <= after


def test_mmap2_offset_of_shared_cache_size():
    assert mmap2_page_offset(syscalls.SHARED_CACHE_SIZE) == 256