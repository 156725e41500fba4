from gedcom_codec.places import PlaceParts, join_place, split_place


def test_split_city_and_region():
    assert split_place("Stockholm, Uppland") == PlaceParts("Stockholm", "Uppland")


def test_split_single_token_is_city():
    assert split_place("  Uppsala ") == PlaceParts(city="Uppsala")


def test_split_only_on_first_comma():
    assert split_place("Klara, Stockholm, Sverige") == PlaceParts("Klara", "Stockholm, Sverige")


def test_split_empty():
    assert split_place(None) == PlaceParts()
    assert split_place("") == PlaceParts()
    assert split_place(", Uppland") == PlaceParts(region="Uppland")


def test_join_place():
    assert join_place("Stockholm", "Uppland") == "Stockholm, Uppland"
    assert join_place("Stockholm", None) == "Stockholm"
    assert join_place(None, "Uppland") == "Uppland"
    assert join_place(None, None) == ""
    assert join_place(" ", "") == ""
