from pdascope.catalog import PdaExample, print_examples

WITH_PROGRAM = PdaExample(
    name="Alpha",
    pda="AddrA",
    description="first entry",
    expected_seeds="['a']",
    program="ProgA",
)
WITHOUT_PROGRAM = PdaExample(
    name="Beta",
    pda="AddrB",
    description="second entry",
    expected_seeds="['b']",
)


def test_describe_lists_fields_in_order():
    lines = WITH_PROGRAM.describe().splitlines()
    assert lines == [
        "   PDA: AddrA",
        "   Program: ProgA",
        "   Description: first entry",
        "   Expected seeds: ['a']",
    ]


def test_describe_omits_missing_program():
    text = WITHOUT_PROGRAM.describe()
    assert "Program:" not in text
    assert len(text.splitlines()) == 3


def test_print_examples_numbers_entries(capsys):
    print_examples("Sample", [WITH_PROGRAM, WITHOUT_PROGRAM])
    out = capsys.readouterr().out
    assert out.startswith("=== Sample ===\n\n1. Alpha\n")
    assert "\n2. Beta\n" in out
    assert out.endswith("   Expected seeds: ['b']\n\n")


def test_print_examples_empty(capsys):
    print_examples("Nothing", [])
    assert capsys.readouterr().out == "=== Nothing ===\n\n"