import json

from typer.testing import CliRunner

from genre_library.main import LibraryManager, app

runner = CliRunner()

def test_browse_genre():
    result = runner.invoke(app, ["browse", "Dystopian"])
    assert result.exit_code == 0
    assert "Available books in Dystopian:" in result.stdout
    assert "- 1984 by George Orwell (Dystopian) - Available" in result.stdout
    assert "- Brave New World by Aldous Huxley (Dystopian) - Available" in result.stdout
    assert result.stdout.index("1984") < result.stdout.index("Brave New World")

def test_browse_unknown_genre():
    result = runner.invoke(app, ["browse", "Horror"])
    assert result.exit_code == 0
    assert result.stdout.strip() == "Available books in Horror:"

def test_available_lists_all_genres():
    result = runner.invoke(app, ["available"])
    assert result.exit_code == 0
    for title in ("1984", "Brave New World", "The Hobbit", "Harry Potter"):
        assert title in result.stdout

def test_genres_summary():
    result = runner.invoke(app, ["genres"])
    assert result.exit_code == 0
    assert "Dystopian: 2/2 available" in result.stdout
    assert "Fantasy: 2/2 available" in result.stdout

def test_session_with_options():
    result = runner.invoke(app, [
        "session", "--genre", "Dystopian", "--checkout", "1984", "--return", "Brave New World",
    ])
    assert result.exit_code == 0
    assert "You checked out: 1984 by George Orwell (Dystopian) - Checked Out" in result.stdout
    assert "You returned: Brave New World by Aldous Huxley (Dystopian) - Available" in result.stdout

    lib = LibraryManager.get_instance()
    assert [b.title for b in lib.available_in_genre("Dystopian")] == ["Brave New World"]

def test_session_prompts_for_missing_values():
    result = runner.invoke(app, ["session"], input="Fantasy\nthe hobbit\nTHE HOBBIT\n")
    assert result.exit_code == 0
    assert "Enter genre to browse" in result.stdout
    assert "Available books in Fantasy:" in result.stdout
    assert "You checked out: The Hobbit by J.R.R. Tolkien (Fantasy) - Checked Out" in result.stdout
    assert "You returned: The Hobbit by J.R.R. Tolkien (Fantasy) - Available" in result.stdout

def test_session_is_default_command():
    result = runner.invoke(app, [], input="Dystopian\n1984\n1984\n")
    assert result.exit_code == 0
    assert "You checked out: 1984" in result.stdout
    assert "You returned: 1984" in result.stdout

def test_session_reports_errors_and_continues():
    result = runner.invoke(app, [
        "session", "--genre", "Dystopian", "--checkout", "The Hobbit", "--return", "Dune",
    ])
    assert result.exit_code == 0
    assert result.stdout.count("Error: item not found in this genre") == 2

def test_session_unknown_genre():
    result = runner.invoke(app, ["session", "-g", "Horror", "--checkout", "Anything", "--return", "Anything"])
    assert result.exit_code == 0
    assert "Available books in Horror:" in result.stdout
    assert "Error: item not found in this genre" in result.stdout

def test_each_run_starts_from_fresh_catalog():
    first = runner.invoke(app, ["session", "-g", "Fantasy", "--checkout", "Harry Potter", "--return", "Dune"])
    assert "You checked out: Harry Potter" in first.stdout
    second = runner.invoke(app, ["session", "-g", "Fantasy", "--checkout", "Harry Potter", "--return", "Dune"])
    assert "You checked out: Harry Potter" in second.stdout
    assert "item already checked out" not in second.stdout

def test_json_output():
    result = runner.invoke(app, ["--output", "json", "browse", "Fantasy"])
    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert [item["title"] for item in payload] == ["The Hobbit", "Harry Potter"]
    assert payload[0] == {
        "title": "The Hobbit",
        "author": "J.R.R. Tolkien",
        "genre": "Fantasy",
        "available": True,
    }

def test_rich_output():
    result = runner.invoke(app, ["--output", "rich", "genres"])
    assert result.exit_code == 0
    assert "Dystopian" in result.stdout
    assert "Fantasy" in result.stdout

def test_catalog_file(tmp_path):
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps([
        {"title": "Ariel", "author": "Sylvia Plath", "genre": "Poetry"},
    ]), encoding="utf-8")
    result = runner.invoke(app, ["--catalog", str(path), "browse", "Poetry"])
    assert result.exit_code == 0
    assert "- Ariel by Sylvia Plath (Poetry) - Available" in result.stdout

def test_bad_catalog_file(tmp_path):
    result = runner.invoke(app, ["--catalog", str(tmp_path / "missing.json"), "available"])
    assert result.exit_code == 1
    assert "Error: Catalog file not found" in result.stdout

def test_catalog_file_not_utf8(tmp_path):
    path = tmp_path / "catalog.json"
    path.write_bytes(b"\xff\xfe[]")
    result = runner.invoke(app, ["--catalog", str(path), "available"])
    assert result.exit_code == 1
    assert "Error: Catalog file is not valid UTF-8" in result.stdout

def test_catalog_path_is_directory(tmp_path):
    result = runner.invoke(app, ["--catalog", str(tmp_path), "available"])
    assert result.exit_code == 1
    assert "Error: Cannot read catalog file" in result.stdout

def test_json_session_output_is_one_object_per_line():
    result = runner.invoke(app, [
        "-o", "json", "session", "-g", "Fantasy", "--checkout", "The Hobbit", "--return", "Dune",
    ])
    assert result.exit_code == 0
    lines = result.stdout.strip().splitlines()
    assert len(lines) == 3
    books = json.loads(lines[0])
    assert [item["title"] for item in books] == ["The Hobbit", "Harry Potter"]
    assert json.loads(lines[1]) == {
        "status": "ok",
        "message": "You checked out: The Hobbit by J.R.R. Tolkien (Fantasy) - Checked Out",
    }
    assert json.loads(lines[2]) == {"status": "error", "message": "Error: item not found in this genre"}

def test_unknown_log_level_is_rejected():
    result = runner.invoke(app, ["--log-level", "LOUD", "available"])
    assert result.exit_code == 2
    assert result.exception is None or isinstance(result.exception, SystemExit)

def test_log_level_is_case_insensitive():
    result = runner.invoke(app, ["--log-level", "debug", "genres"])
    assert result.exit_code == 0
    assert "Dystopian: 2/2 available" in result.stdout
