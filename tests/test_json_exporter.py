import json

import pytest

from gedcom_codec.exceptions import ModelError
from gedcom_codec.exporter.json_exporter import (
    dump_state,
    dumps_state,
    load_state,
    relationship_from_dict,
    state_from_dict,
)
from gedcom_codec.models import Individual, Move, ParentChildRelationship, SpouseRelationship

APP_STATE = {
    "individuals": [
        {
            "id": "1",
            "givenName": "Anna",
            "familyName": "Svensson",
            "gender": "female",
            "dateOfBirth": "1900-01-02",
            "birthCity": "Stockholm",
            "moves": [{"id": "m1", "city": "Uppsala", "note": "Studier"}],
        },
        {"id": "2", "givenName": "Erik", "gender": "man?"},
    ],
    "relationships": [
        {"id": "s", "type": "spouse", "person1Id": "2", "person2Id": "1",
         "weddingDate": "1925"},
        {"id": "p", "type": "parent-child", "parentIds": ["1"], "childId": "3"},
    ],
}


def test_state_from_dict():
    state = state_from_dict(APP_STATE)

    anna, erik = state.individuals
    assert anna.given_name == "Anna"
    assert anna.date_of_birth == "1900-01-02"
    assert anna.moves == [Move(id="m1", city="Uppsala", note="Studier")]
    assert erik.gender == "unknown"
    assert erik.family_name == ""

    spouse, child = state.relationships
    assert isinstance(spouse, SpouseRelationship)
    assert spouse.wedding_date == "1925"
    assert isinstance(child, ParentChildRelationship)
    assert child.parent_ids == ["1"]


def test_dumps_state_uses_camel_case_and_omits_empty():
    data = json.loads(
        dumps_state(
            [Individual(id="1", given_name="Anna", birth_region="Uppland")],
            [ParentChildRelationship(id="p", parent_ids=["9"], child_id="1")],
        )
    )

    assert data["individuals"] == [
        {"id": "1", "givenName": "Anna", "birthRegion": "Uppland", "gender": "unknown", "moves": []}
    ]
    assert data["relationships"] == [
        {"id": "p", "type": "parent-child", "parentIds": ["9"], "childId": "1"}
    ]


def test_dump_and_load_file(tmp_path):
    state = state_from_dict(APP_STATE)
    path = dump_state(tmp_path / "state.json", state.individuals, state.relationships)

    loaded = load_state(path)

    assert loaded.individuals == state.individuals
    assert loaded.relationships == state.relationships


@pytest.mark.parametrize(
    "data",
    [
        {"id": "x", "type": "sibling"},
        {"type": "spouse", "person1Id": "a", "person2Id": "b"},
        {"id": "x", "type": "parent-child", "parentIds": [], "childId": "c"},
        {"id": "x", "type": "spouse", "person1Id": "a"},
    ],
)
def test_bad_relationships_raise(data):
    with pytest.raises(ModelError):
        relationship_from_dict(data)


def test_load_state_rejects_non_object(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text("[]", encoding="utf-8")
    with pytest.raises(ModelError):
        load_state(path)


def test_load_state_rejects_malformed_json(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text('{"individuals": [', encoding="utf-8")
    with pytest.raises(ModelError):
        load_state(path)
