"""Tests for _types.py dataclasses."""

import dataclasses

import pytest

from multimodal._types import Blob, ImageBytes, RemoteReference, Text


def test_image_bytes_mime_type() -> None:
    assert ImageBytes("jpeg", b"x").mime_type == "image/jpeg"
    assert ImageBytes("png", b"x").mime_type == "image/png"


def test_remote_reference_defaults() -> None:
    ref = RemoteReference("gs://bucket/file")
    assert ref.uri == "gs://bucket/file"
    assert ref.mime_type is None


def test_blob_and_text() -> None:
    assert Blob("application/pdf", b"%PDF").data == b"%PDF"
    assert Text("hello").text == "hello"


def test_parts_are_frozen() -> None:
    part = Text("hello")
    with pytest.raises(dataclasses.FrozenInstanceError):
        part.text = "changed"  # type: ignore[misc]


def test_parts_compare_by_value() -> None:
    assert Blob("text/plain", b"a") == Blob("text/plain", b"a")
    assert RemoteReference("gs://a/b.png", "image/png") != RemoteReference("gs://a/b.png")
