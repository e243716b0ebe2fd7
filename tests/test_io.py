import pytest

from mtgen.common.io import read_table, write_xml_file


def test_read_table_keeps_column_order_and_blanks(csv_file):
    rows = read_table(csv_file)

    assert len(rows) == 2
    assert list(rows[0]) == [
        "DeveloperName", "Label", "Custom_Permissions__c", "Run_Or_Bypass__c", "Object__c", "Active__c",
    ]
    assert rows[0]["Custom_Permissions__c"] == ""
    assert rows[1]["Run_Or_Bypass__c"] == ""
    # values stay strings, no bool/NaN coercion
    assert rows[0]["Active__c"] == "true"


def test_read_table_strips_bom(tmp_path):
    path = tmp_path / "bom.csv"
    path.write_bytes("DeveloperName,Label\nA,B\n".encode("utf-8-sig"))

    assert read_table(path) == [{"DeveloperName": "A", "Label": "B"}]


def test_read_table_excel(tmp_path):
    pd = pytest.importorskip("pandas")
    pytest.importorskip("openpyxl")
    path = tmp_path / "microtriggers.xlsx"
    pd.DataFrame({"DeveloperName": ["A"], "Label": ["Label A"], "Order__c": ["1"]}).to_excel(path, index=False)

    assert read_table(path) == [{"DeveloperName": "A", "Label": "Label A", "Order__c": "1"}]


def test_read_table_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_table(tmp_path / "nope.csv")


def test_read_table_unsupported_extension(tmp_path):
    path = tmp_path / "rows.json"
    path.write_text("[]", encoding="utf-8")
    with pytest.raises(ValueError, match="Unsupported file extension"):
        read_table(path)


def test_write_xml_file_creates_directory_and_overwrites(tmp_path):
    out_dir = tmp_path / "metadata" / "nested"

    path = write_xml_file(out_dir, "a.xml", "first")
    assert path == out_dir / "a.xml"
    assert path.read_text(encoding="utf-8") == "first"

    write_xml_file(out_dir, "a.xml", "second")
    assert path.read_text(encoding="utf-8") == "second"


def test_read_table_rejects_legacy_xls(tmp_path):
    path = tmp_path / "microtriggers.xls"
    path.write_bytes(bytes.fromhex("D0CF11E0A1B11AE1") + b"\x00" * 504)

    with pytest.raises(ValueError, match="Unsupported file extension: .xls"):
        read_table(path)


def test_read_table_trims_whitespace(tmp_path):
    path = tmp_path / "pasted.csv"
    path.write_text(
        "DeveloperName, Label ,Object__c\nAccountBeforeInsert, Account Before Insert ,Account  \n",
        encoding="utf-8",
    )

    assert read_table(path) == [
        {"DeveloperName": "AccountBeforeInsert", "Label": "Account Before Insert", "Object__c": "Account"},
    ]
