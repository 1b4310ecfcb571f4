import openpyxl
import pytest

from cli import ui
from cli.main import main


@pytest.fixture(autouse=True)
def wide_console(monkeypatch):
    monkeypatch.setattr(ui.console, "width", 200)


def run(capsys, contacts_path, *argv):
    code = 0
    try:
        main(["-j", str(contacts_path), "-l", "false", *argv])
    except SystemExit as e:
        code = e.code
    return code, capsys.readouterr().out


def test_list_empty(capsys, contacts_path):
    code, out = run(capsys, contacts_path, "list")
    assert code == 0
    assert "Empty contacts list." in out


def test_add_get_list_remove(capsys, contacts_path, read_raw):
    code, out = run(capsys, contacts_path, "add", "Ada Lovelace", "ada@example.com", "555-0100")
    assert code == 0
    assert "Contact has been added." in out
    [record] = read_raw(contacts_path)
    assert record["name"] == "Ada Lovelace"
    cid = record["id"]
    assert cid in out

    code, out = run(capsys, contacts_path, "get", cid)
    assert code == 0
    assert "ada@example.com" in out

    code, out = run(capsys, contacts_path, "list")
    assert code == 0
    assert "List of contacts:" in out
    assert "Ada Lovelace" in out
    assert cid in out

    code, out = run(capsys, contacts_path, "remove", cid)
    assert code == 0
    assert f"Contact with id {cid} has been deleted." in out
    assert read_raw(contacts_path) == []


def test_get_and_remove_unknown_id(capsys, contacts_path):
    code, out = run(capsys, contacts_path, "get", "ghost")
    assert code == 1
    assert "Contact with id ghost not exist!" in out

    code, out = run(capsys, contacts_path, "remove", "ghost")
    assert code == 1
    assert "Contact with id ghost not exist!" in out


def test_missing_file_reports_read_error(capsys, tmp_path):
    code, out = run(capsys, tmp_path / "absent.json", "list")
    assert code == 2
    assert "Read error" in out


def test_corrupt_file_reports_read_error(capsys, contacts_path):
    contacts_path.write_text("{oops", encoding="utf-8")
    code, out = run(capsys, contacts_path, "add", "a", "b", "c")
    assert code == 2
    assert "Read error" in out
    assert contacts_path.read_text(encoding="utf-8") == "{oops"


def test_write_failure_reports_write_error(capsys, contacts_path, monkeypatch):
    def boom(src, dst):
        raise PermissionError("denied")

    monkeypatch.setattr("adapters.json_store.os.replace", boom)
    code, out = run(capsys, contacts_path, "add", "a", "b", "c")
    assert code == 2
    assert "Write error" in out
    assert contacts_path.read_text(encoding="utf-8") == "[]"


def test_markup_like_input_is_printed_verbatim(capsys, contacts_path):
    code, out = run(capsys, contacts_path, "add", "[bold]Eve[/bold]", "e", "1")
    assert code == 0
    assert "[bold]Eve[/bold]" in out


def test_init_creates_file_once(capsys, tmp_path, read_raw):
    path = tmp_path / "db" / "contacts.json"
    code, out = run(capsys, path, "init")
    assert code == 0
    assert read_raw(path) == []

    code, out = run(capsys, path, "init")
    assert code == 2
    assert "already exists" in out

    code, _ = run(capsys, path, "init", "--force")
    assert code == 0


def test_export_writes_workbook(capsys, contacts_path, tmp_path):
    run(capsys, contacts_path, "add", "Ada", "ada@example.com", "555")
    out_file = tmp_path / "out" / "book"
    code, out = run(capsys, contacts_path, "export", "-o", str(out_file))
    assert code == 0
    assert "Exported 1 contact(s)" in out

    wb = openpyxl.load_workbook(out_file.with_suffix(".xlsx"))
    rows = list(wb["Contacts"].iter_rows(values_only=True))
    assert rows[0] == ("ID", "Name", "Email", "Phone")
    assert rows[1][1:] == ("Ada", "ada@example.com", "555")


def test_export_rejects_other_suffix(capsys, contacts_path, tmp_path):
    code, out = run(capsys, contacts_path, "export", "-o", str(tmp_path / "book.csv"))
    assert code == 2
    assert "Only .xlsx files are supported" in out


def test_action_is_required(capsys):
    with pytest.raises(SystemExit) as exc:
        main([])
    assert exc.value.code == 2


def test_show_config_uses_json_override(capsys, contacts_path):
    main(["-j", str(contacts_path), "--show-config"])
    out = capsys.readouterr().out
    assert "Resolved configuration:" in out
    assert str(contacts_path) in out


def test_bad_bool_flag_is_usage_error(capsys, contacts_path):
    with pytest.raises(SystemExit) as exc:
        main(["-j", str(contacts_path), "-l", "maybe", "list"])
    assert exc.value.code == 2
    assert "Boolean value expected" in capsys.readouterr().err


def test_export_with_control_characters(capsys, contacts_path, tmp_path, read_raw):
    code, _ = run(capsys, contacts_path, "add", "Bell\x07", "e", "1")
    assert code == 0
    assert read_raw(contacts_path)[0]["name"] == "Bell\x07"

    out_file = tmp_path / "o.xlsx"
    code, out = run(capsys, contacts_path, "export", "-o", str(out_file))
    assert code == 0
    assert "Exported 1 contact(s)" in out
    rows = list(openpyxl.load_workbook(out_file)["Contacts"].iter_rows(values_only=True))
    assert rows[1][1] == "Bell"
