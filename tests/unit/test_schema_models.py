"""Unit tests for MongoDB document models."""

from datetime import datetime, timezone

import pytest
from bson import ObjectId

from schemas.models.base import MongoBaseModel, PyObjectId, parse_object_id
from schemas.models.item import PLACEHOLDER_IMAGE, LostItemDoc
from schemas.models.otp import OneTimeCodeDoc


def now():
    return datetime.now(timezone.utc)


class TestPyObjectId:
    def test_accepts_objectid_instance(self):
        o = ObjectId()
        assert PyObjectId._validate(o) == o

    def test_accepts_valid_string(self):
        s = str(ObjectId())
        result = PyObjectId._validate(s)
        assert isinstance(result, ObjectId)
        assert str(result) == s

    def test_rejects_invalid_string(self):
        with pytest.raises(ValueError):
            PyObjectId._validate("not-an-objectid")


class TestParseObjectId:
    def test_valid(self):
        o = ObjectId()
        assert parse_object_id(str(o)) == o

    @pytest.mark.parametrize("value", ["I1", "", None, 42])
    def test_invalid_returns_none(self, value):
        assert parse_object_id(value) is None


class TestMongoBaseModel:
    def test_from_mongo_returns_none_for_none(self):
        assert MongoBaseModel.from_mongo(None) is None

    def test_id_alias(self):
        o = ObjectId()
        assert MongoBaseModel.model_validate({"_id": o}).id == o

    def test_to_mongo_drops_none_id(self):
        assert "_id" not in MongoBaseModel().to_mongo()

    def test_to_mongo_keeps_id(self):
        o = ObjectId()
        assert MongoBaseModel(id=o).to_mongo()["_id"] == o


class TestOneTimeCodeDoc:
    def test_from_mongo(self):
        issued = now()
        doc = OneTimeCodeDoc.from_mongo(
            {
                "_id": ObjectId(),
                "email": "a@x.edu",
                "code_hash": "f" * 64,
                "expires_at": issued,
                "issued_at": issued,
            }
        )
        assert doc.email == "a@x.edu"
        assert doc.code_hash == "f" * 64

    def test_requires_code_hash(self):
        with pytest.raises(Exception):
            OneTimeCodeDoc(email="a@x.edu", expires_at=now(), issued_at=now())


class TestLostItemDoc:
    def _base(self, **overrides):
        data = dict(
            title="Calculator",
            description="Casio fx-991",
            category="Electronics",
            location="Room 204",
            date=now(),
            contact_name="Ravi",
            contact_phone="+919876543210",
        )
        data.update(overrides)
        return data

    def test_defaults(self):
        doc = LostItemDoc(**self._base())
        assert doc.image == PLACEHOLDER_IMAGE
        assert doc.status == "lost"
        assert doc.contact_email == ""

    def test_rejects_unknown_status(self):
        with pytest.raises(Exception):
            LostItemDoc(**self._base(status="stolen"))

    def test_round_trip_through_mongo_shape(self):
        doc = LostItemDoc(**self._base(contact_email="r@x.edu"))
        raw = doc.to_mongo()
        assert "_id" not in raw
        raw["_id"] = ObjectId()
        again = LostItemDoc.from_mongo(raw)
        assert again.contact_email == "r@x.edu"
        assert again.id == raw["_id"]
