"""
Unit tests for message summaries (summary.py).
"""

import hashlib

import pytest

from emlx2json.models.message import Message, MessagePart
from emlx2json.parsing.emlx_parser import parse
from emlx2json.summary import (
    get_email_from_contact_header,
    get_message_uuid,
    get_name_from_contact_header,
    parse_date_to_utc_iso,
    remove_quoted_printables,
    summarize,
)


class TestGetMessageUuid:
    """Tests for get_message_uuid() function."""

    @pytest.mark.unit
    def test_sha1_of_subject_date_message_id(self):
        headers = {"Subject": "Hi", "Date": "Mon", "Message-ID": "<1@x>"}
        assert get_message_uuid(headers) == hashlib.sha1(b"HiMon<1@x>").hexdigest()

    @pytest.mark.unit
    def test_field_case_ignored(self):
        assert get_message_uuid({"Message-Id": "<1@x>"}) == get_message_uuid({"Message-ID": "<1@x>"})

    @pytest.mark.unit
    def test_missing_fields(self):
        assert get_message_uuid({}) == hashlib.sha1(b"").hexdigest()

    @pytest.mark.unit
    def test_lone_surrogate_in_subject(self):
        assert len(get_message_uuid({"Subject": "A\ud800B"})) == 40


class TestParseDateToUtcIso:
    """Tests for parse_date_to_utc_iso() function."""

    @pytest.mark.unit
    def test_offset_converted_to_utc(self):
        assert parse_date_to_utc_iso("Mon, 4 Mar 2013 10:12:01 +0100") == "2013-03-04T09:12:01+00:00"

    @pytest.mark.unit
    def test_folded_date(self):
        assert parse_date_to_utc_iso("Mon, 4 Mar 2013\n\t10:12:01 +0100") == "2013-03-04T09:12:01+00:00"

    @pytest.mark.unit
    def test_unparseable(self):
        assert parse_date_to_utc_iso("not a date") is None
        assert parse_date_to_utc_iso(None) is None


class TestContactHeaders:
    """Tests for contact header helpers."""

    @pytest.mark.unit
    def test_name(self):
        assert get_name_from_contact_header("Anna Bianchi <anna@example.com>") == "Anna Bianchi"
        assert get_name_from_contact_header('"Dario" <dario@example.net>') == "Dario"
        assert get_name_from_contact_header("") == ""
        assert get_name_from_contact_header(None) == ""

    @pytest.mark.unit
    def test_quoted_printable_name(self):
        assert get_name_from_contact_header("Caf=C3=A9 Owner <owner@example.com>") == "Café Owner"

    @pytest.mark.unit
    def test_emails(self):
        assert get_email_from_contact_header("Anna Bianchi <anna@example.com>") == "anna@example.com"
        assert (
            get_email_from_contact_header("bob@example.org,\n carla@example.org")
            == "bob@example.org, carla@example.org"
        )
        assert get_email_from_contact_header("undisclosed-recipients:;") == ""

    @pytest.mark.unit
    def test_remove_quoted_printables(self):
        assert remove_quoted_printables("a=3Db") == "a=b"
        assert remove_quoted_printables("") == ""

    @pytest.mark.unit
    def test_remove_quoted_printables_lone_surrogate(self):
        text = remove_quoted_printables("A\ud800B")
        assert "\ud800" not in text
        text.encode("utf-8")


class TestSummarize:
    """Tests for summarize() function."""

    @pytest.mark.unit
    def test_multipart_summary(self, multipart_alternative):
        summary = summarize(parse(multipart_alternative))

        assert summary.subject == "Opening hours"
        assert summary.date_utc == "2013-03-05T07:00:00+00:00"
        assert summary.from_name == "Anna Bianchi"
        assert summary.from_email == "anna@example.com"
        assert summary.to_emails == "bob@example.org, carla@example.org"
        assert summary.cc_emails == "dario@example.net"
        assert summary.preview == "Café opening hours changed."
        assert summary.part_count == 2
        assert summary.mime_types == ["text/plain", "text/html"]
        assert len(summary.uuid) == 40

    @pytest.mark.unit
    def test_html_only_preview(self):
        message = Message(
            headers={"Subject": "x"},
            parts=[
                MessagePart(
                    headers={"Content-Type": "text/html"},
                    body="<html><body><p>Hello there</p></body></html>",
                )
            ],
        )
        assert summarize(message).preview == "Hello there"

    @pytest.mark.unit
    def test_preview_truncated(self, emlx_plain):
        summary = summarize(parse(emlx_plain), preview_chars=6)
        assert summary.preview == "Hi Bob"
        assert summary.mime_types == [""]

    @pytest.mark.unit
    def test_empty_message(self):
        summary = summarize(Message())
        assert summary.preview == ""
        assert summary.part_count == 0
        assert summary.date_utc is None
