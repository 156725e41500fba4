from gedcom_codec import (
    Individual,
    Move,
    ParentChildRelationship,
    SpouseRelationship,
    generate_gedcom,
)


def lines_of(text):
    return text.split("\n")


def block(lines, opener):
    """Lines of the level-0 record starting with ``opener``."""
    start = lines.index(opener)
    end = next(
        (i for i in range(start + 1, len(lines)) if lines[i].startswith("0 ")),
        len(lines),
    )
    return lines[start:end]


def test_header_and_trailer_on_empty_input():
    lines = lines_of(generate_gedcom([], []))

    assert lines[0] == "0 HEAD"
    assert lines[-1] == "0 TRLR"
    assert lines[1:6] == [
        "1 SOUR GenealogyApp",
        "1 GEDC",
        "2 VERS 5.5.1",
        "2 FORM LINEAGE-LINKED",
        "1 CHAR UTF-8",
    ]


def test_custom_source():
    assert "1 SOUR MyApp" in lines_of(generate_gedcom([], [], source="MyApp"))


def test_single_individual_scenario():
    anna = Individual(
        id="1",
        given_name="Anna",
        family_name="Svensson",
        gender="female",
        date_of_birth="1900-01-02",
        birth_city="Stockholm",
        birth_region="Uppland",
    )

    lines = lines_of(generate_gedcom([anna], []))

    assert block(lines, "0 @I1@ INDI") == [
        "0 @I1@ INDI",
        "1 NAME Anna /Svensson/",
        "1 SEX F",
        "1 BIRT",
        "2 DATE 02 JAN 1900",
        "2 PLAC Stockholm, Uppland",
    ]


def test_partial_individual_renders_defaults():
    lines = lines_of(generate_gedcom([Individual(id="x")], []))

    assert block(lines, "0 @I1@ INDI") == ["0 @I1@ INDI", "1 NAME  //", "1 SEX U"]


def test_birth_family_name_fallback_and_death_block():
    ind = Individual(
        id="1",
        given_name="Karin",
        birth_family_name="Berg",
        gender="female",
        death_congregation="Klara",
    )

    lines = lines_of(generate_gedcom([ind], []))

    assert "1 NAME Karin /Berg/" in lines
    assert "1 BIRT" not in lines
    idx = lines.index("1 DEAT")
    assert lines[idx + 1] == "2 NOTE Församling: Klara"


def test_moves_emit_resi_blocks_in_order():
    ind = Individual(
        id="1",
        given_name="Karl",
        gender="male",
        moves=[
            Move(
                id="m1",
                date="1920-03-05",
                city="Göteborg",
                region="Västergötland",
                congregation="Domkyrko",
                note="Moved for work",
            ),
            Move(id="m2", city="Uppsala"),
            Move(id="m3", congregation="Vaksala"),
        ],
    )

    lines = lines_of(generate_gedcom([ind], []))

    start = lines.index("1 RESI")
    assert lines[start:start + 10] == [
        "1 RESI",
        "2 DATE 05 MAR 1920",
        "2 PLAC Göteborg, Västergötland",
        "2 NOTE Församling: Domkyrko",
        "2 NOTE Moved for work",
        "1 RESI",
        "2 PLAC Uppsala",
        "1 RESI",
        "2 NOTE Församling: Vaksala",
        "0 TRLR",
    ]


def test_story_emits_note_and_cont():
    lines = lines_of(generate_gedcom([Individual(id="1", story="A\nB\nC")], []))

    start = lines.index("1 NOTE A")
    assert lines[start:start + 3] == ["1 NOTE A", "2 CONT B", "2 CONT C"]


def test_story_splits_only_on_newlines():
    lines = lines_of(generate_gedcom([Individual(id="1", story="A\u2028B\r\nC")], []))

    start = lines.index("1 NOTE A\u2028B")
    assert lines[start:start + 2] == ["1 NOTE A\u2028B", "2 CONT C"]


def test_spouse_and_child_build_one_family_with_links():
    erik = Individual(id="e", given_name="Erik", gender="male")
    anna = Individual(id="a", given_name="Anna", gender="female")
    lisa = Individual(id="l", given_name="Lisa", gender="female")

    text = generate_gedcom(
        [anna, erik, lisa],
        [
            SpouseRelationship(id="r1", person1_id="e", person2_id="a"),
            ParentChildRelationship(id="r2", parent_ids=["e", "a"], child_id="l"),
        ],
    )
    lines = lines_of(text)

    assert block(lines, "0 @F1@ FAM") == [
        "0 @F1@ FAM",
        "1 HUSB @I2@",
        "1 WIFE @I1@",
        "1 MARR",
        "1 CHIL @I3@",
    ]
    assert "0 @F2@ FAM" not in lines
    assert "1 FAMS @F1@" in block(lines, "0 @I1@ INDI")
    assert "1 FAMS @F1@" in block(lines, "0 @I2@ INDI")
    assert "1 FAMC @F1@" in block(lines, "0 @I3@ INDI")


def test_wedding_scenario():
    text = generate_gedcom(
        [Individual(id="1"), Individual(id="2")],
        [
            SpouseRelationship(
                id="r",
                person1_id="1",
                person2_id="2",
                wedding_date="1905-06-12",
                wedding_city="Stockholm",
                wedding_region="Uppland",
                wedding_congregation="Storkyrkan",
            )
        ],
    )

    fam = block(lines_of(text), "0 @F1@ FAM")
    start = fam.index("1 MARR")
    assert fam[start:start + 4] == [
        "1 MARR",
        "2 DATE 12 JUN 1905",
        "2 PLAC Stockholm, Uppland",
        "2 NOTE Församling: Storkyrkan",
    ]


def test_spouse_slots_follow_field_order_not_gender():
    wife = Individual(id="w", gender="female")
    husband = Individual(id="h", gender="male")

    lines = lines_of(
        generate_gedcom(
            [husband, wife],
            [SpouseRelationship(id="r", person1_id="w", person2_id="h")],
        )
    )

    assert block(lines, "0 @F1@ FAM")[1:3] == ["1 HUSB @I2@", "1 WIFE @I1@"]


def test_shared_parents_without_spouse_have_no_marr():
    dad = Individual(id="d", gender="male")
    mum = Individual(id="m", gender="female")
    kid1 = Individual(id="k1")
    kid2 = Individual(id="k2")

    lines = lines_of(
        generate_gedcom(
            [dad, mum, kid1, kid2],
            [
                ParentChildRelationship(id="r1", parent_ids=["m", "d"], child_id="k1"),
                ParentChildRelationship(id="r2", parent_ids=["d", "m"], child_id="k2"),
            ],
        )
    )

    assert block(lines, "0 @F1@ FAM") == [
        "0 @F1@ FAM",
        "1 HUSB @I1@",
        "1 WIFE @I2@",
        "1 CHIL @I3@",
        "1 CHIL @I4@",
    ]
    assert sum(1 for line in lines if line.endswith(" FAM")) == 1
    assert "1 MARR" not in lines


def test_dangling_relationships_are_skipped():
    ind = Individual(id="1")

    lines = lines_of(
        generate_gedcom(
            [ind],
            [
                SpouseRelationship(id="s", person1_id="ghost1", person2_id="ghost2"),
                ParentChildRelationship(id="p", parent_ids=["1"], child_id="ghost"),
            ],
        )
    )

    assert not any(line.endswith(" FAM") for line in lines)


def test_generation_is_deterministic():
    people = [Individual(id=str(n), given_name=f"P{n}") for n in range(1, 5)]
    rels = [
        ParentChildRelationship(id="a", parent_ids=["1", "2"], child_id="3"),
        ParentChildRelationship(id="b", parent_ids=["2"], child_id="4"),
    ]

    assert generate_gedcom(people, rels) == generate_gedcom(people, rels)
