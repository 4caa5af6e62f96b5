# SPDX-License-Identifier: LGPL-3.0-or-later
# Copyright (C) 2025-2026 Kris Kirby, KE4AHR

"""
tests/test_record.py

Unit tests for connection record parsing and row formatting.

Covers:
- Positional extraction in both layouts
- Digipeater chain parsing and rendering
- Vs/Vr/Va formatting
- Short lines are skipped, token cap honoured
- atoi-style numeric conversion
"""

import pytest

from pyax25_netstat.core.layout import HEADERED_LAYOUT, LEGACY_LAYOUT
from pyax25_netstat.core.record import (
    ConnectionRecord,
    format_digipeaters,
    format_row,
    format_sequence,
    parse_and_format,
    parse_line,
    split_digipeater_chain,
    to_int,
    tokenize,
)


class TestTokenize:
    def test_runs_of_whitespace(self):
        assert tokenize("  a \t b   c\r") == ["a", "b", "c"]

    def test_token_cap(self):
        line = " ".join(str(i) for i in range(40))
        assert len(tokenize(line)) == 32
        assert tokenize(line, max_fields=3) == ["0", "1", "2"]


class TestToInt:
    @pytest.mark.parametrize("token,value", [
        ("12", 12),
        ("007", 7),
        ("-3", -3),
        ("+4", 4),
        ("5x", 5),
        ("abc", 0),
        ("*", 0),
        ("", 0),
    ])
    def test_conversion(self, token, value):
        assert to_int(token) == value


class TestLegacyRecords:
    def test_fields(self, legacy_line):
        record = parse_line(legacy_line, LEGACY_LAYOUT)
        assert record == ConnectionRecord(
            destination="N0CALL",
            source="KE4AHR-1",
            interface="ax0",
            state_code=3,
            send_seq=2,
            recv_seq=1,
            ack_seq=2,
            send_queue="512",
            recv_queue="0",
            digipeater1="DIGI1",
            digipeater2="DIGI2",
        )

    def test_row(self, legacy_line):
        row = parse_and_format(legacy_line, LEGACY_LAYOUT)
        assert row == (
            "N0CALL       KE4AHR-1     ax0     ESTABLISHED  DIGI1     DIGI2     "
            "  002/001/002      512       0"
        )

    def test_no_digipeaters(self, legacy_line):
        line = legacy_line.replace("N0CALL,DIGI1,DIGI2", "N0CALL")
        record = parse_line(line, LEGACY_LAYOUT)
        assert record.destination == "N0CALL"
        assert record.digipeater1 is None
        assert record.digipeater2 is None
        assert record.digipeaters == "*"

    def test_one_digipeater(self, legacy_line):
        line = legacy_line.replace("N0CALL,DIGI1,DIGI2", "N0CALL,WIDE1-1")
        record = parse_line(line, LEGACY_LAYOUT)
        assert record.digipeater1 == "WIDE1-1"
        assert record.digipeater2 is None

    def test_short_line_skipped(self, legacy_line):
        short = " ".join(legacy_line.split()[:23])
        assert parse_line(short, LEGACY_LAYOUT) is None
        assert parse_line(short, LEGACY_LAYOUT) is None
        assert parse_and_format(short, LEGACY_LAYOUT) is None

    def test_token_cap_can_drop_record(self, legacy_line):
        assert parse_line(legacy_line, LEGACY_LAYOUT, max_fields=20) is None

    def test_extra_tokens_ignored(self, legacy_line):
        line = legacy_line + " extra1 extra2"
        assert parse_and_format(line, LEGACY_LAYOUT) == parse_and_format(legacy_line, LEGACY_LAYOUT)


class TestHeaderedRecords:
    def test_fields(self, headered_line):
        record = parse_line(headered_line, HEADERED_LAYOUT)
        assert record.destination == "N0CALL"
        assert record.source == "KE4AHR-1"
        assert record.interface == "ax0"
        assert record.state == "ESTABLISHED"
        assert record.sequence == "002/001/002"
        assert (record.send_queue, record.recv_queue) == ("256", "0")
        assert record.digipeater1 is None
        assert record.digipeater2 is None

    def test_star_digipeaters_render_single_placeholder(self, headered_line):
        row = parse_and_format(headered_line, HEADERED_LAYOUT)
        assert row == (
            "N0CALL       KE4AHR-1     ax0     ESTABLISHED  *                     "
            "002/001/002      256       0"
        )
        assert "-" not in row.split()[4]

    def test_column_digipeaters(self, headered_line):
        fields = headered_line.split()
        fields[4], fields[5] = "WIDE1-1", "WIDE2-2"
        record = parse_line(" ".join(fields), HEADERED_LAYOUT)
        assert record.digipeater1 == "WIDE1-1"
        assert record.digipeater2 == "WIDE2-2"
        assert record.digipeaters == "WIDE1-1   WIDE2-2   "

    def test_commas_kept_in_destination(self, headered_line):
        line = headered_line.replace("N0CALL", "N0CALL,X")
        assert parse_line(line, HEADERED_LAYOUT).destination == "N0CALL,X"

    def test_queues_passed_through(self, headered_line):
        fields = headered_line.split()
        fields[18], fields[19] = "n/a", "?"
        record = parse_line(" ".join(fields), HEADERED_LAYOUT)
        assert (record.send_queue, record.recv_queue) == ("n/a", "?")

    def test_short_line_skipped(self, headered_line):
        short = " ".join(headered_line.split()[:20])
        assert parse_line(short, HEADERED_LAYOUT) is None


class TestDigipeaterChain:
    @pytest.mark.parametrize("raw,expected", [
        ("N0CALL", ("N0CALL", None, None)),
        ("N0CALL,D1", ("N0CALL", "D1", None)),
        ("N0CALL,D1,D2", ("N0CALL", "D1", "D2")),
        ("N0CALL,D1,D2,D3", ("N0CALL", "D1", "D2,D3")),
        ("N0CALL,", ("N0CALL", "", None)),
    ])
    def test_split(self, raw, expected):
        assert split_digipeater_chain(raw) == expected


class TestFormatting:
    def test_no_digipeaters(self):
        assert format_digipeaters(None, None) == "*"

    def test_one_digipeater(self):
        assert format_digipeaters("DIGI1", None) == "DIGI1         -      "

    def test_two_digipeaters(self):
        assert format_digipeaters("DIGI1", "DIGI2") == "DIGI1     DIGI2     "

    def test_empty_first_digipeater_is_present(self):
        assert format_digipeaters("", None) == " " * 10 + "    -      "

    def test_digipeaters_capped(self):
        text = format_digipeaters("LONGDIGI-15", "ANOTHERLONG-12")
        assert len(text) == 24
        assert text.startswith("LONGDIGI-15ANOTHERLONG")

    @pytest.mark.parametrize("values,expected", [
        ((0, 0, 0), "000/000/000"),
        ((5, 0, 123), "005/000/123"),
        ((7, 127, 64), "007/127/064"),
    ])
    def test_sequence(self, values, expected):
        assert format_sequence(*values) == expected

    def test_sequence_capped(self):
        assert format_sequence(1000, 2000, 3) == "1000/2000/0"

    def test_row_widths_grow_for_long_values(self):
        record = ConnectionRecord(
            destination="VERYLONGCALL-15",
            source="S",
            interface="ax0",
            state_code=0,
            send_seq=0,
            recv_seq=0,
            ack_seq=0,
            send_queue="0",
            recv_queue="0",
        )
        row = format_row(record)
        assert row.startswith("VERYLONGCALL-15 S ")
        assert "LISTENING" in row
