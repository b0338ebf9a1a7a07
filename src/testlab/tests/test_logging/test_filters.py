# src/testlab/tests/test_logging/test_filters.py
import logging

import pytest

from testlab.core.logging.filters import SectionFilter, get_section, reset_section, set_section

pytestmark = pytest.mark.logging


def make_record():
    # name, level, pathname, lineno, msg, args, exc_info
    return logging.LogRecord("test", logging.INFO, __file__, 1, "hello %s", ("world",), None)


def test_section_filter_defaults_to_dash():
    rec = make_record()
    token = set_section(None)
    try:
        f = SectionFilter()
        assert f.filter(rec) is True
        assert rec.section == "-"  # fallback sentinel
    finally:
        reset_section(token)


def test_section_filter_uses_contextvar():
    rec = make_record()
    token = set_section("4. Pengujian Batasan")
    try:
        SectionFilter().filter(rec)
    finally:
        reset_section(token)
    assert rec.section == "4. Pengujian Batasan"


def test_section_filter_respects_record_extra():
    rec = make_record()
    rec.section = "explicit"
    token = set_section("context-section")
    try:
        SectionFilter().filter(rec)
    finally:
        reset_section(token)
    # record.section keeps the explicit value (respect extra)
    assert rec.section == "explicit"


def test_reset_restores_previous_section():
    outer = set_section("outer")
    inner = set_section("inner")
    assert get_section() == "inner"
    reset_section(inner)
    assert get_section() == "outer"
    reset_section(outer)
    assert get_section() is None
