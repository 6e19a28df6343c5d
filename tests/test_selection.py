from pathlib import Path

from whatpicturepath.selection import SelectionSet


def _touch(path: Path) -> str:
    path.write_bytes(b"")
    return str(path)


def test_add_same_path_twice_adds_once(tmp_path: Path) -> None:
    image = _touch(tmp_path / "a.jpg")
    selection = SelectionSet()

    assert selection.add([image]) == 1
    assert selection.add([image]) == 0
    assert len(selection) == 1


def test_add_deduplicates_case_insensitively() -> None:
    selection = SelectionSet(validator=lambda _: True)

    assert selection.add(["/x/A.JPG"]) == 1
    assert selection.add(["/x/a.jpg"]) == 0
    assert selection.paths == ("/x/A.JPG",)
    assert "/X/a.Jpg" in selection


def test_merge_rejects_duplicates_within_one_batch(tmp_path: Path) -> None:
    a = _touch(tmp_path / "a.jpg")
    b = _touch(tmp_path / "b.png")
    selection = SelectionSet()

    result = selection.merge([a, b, a, a.upper()])

    assert result.requested == 4
    assert result.added == 2
    assert result.skipped == 2
    assert list(selection) == [a, b]


def test_add_never_accepts_invalid_candidates(tmp_path: Path) -> None:
    a = _touch(tmp_path / "a.jpg")
    text = _touch(tmp_path / "notes.txt")
    missing = str(tmp_path / "missing.png")
    selection = SelectionSet()

    assert selection.add([missing, text, a, text, missing]) == 1
    assert selection.paths == (a,)


def test_add_keeps_first_seen_order(tmp_path: Path) -> None:
    names = ["c.gif", "a.bmp", "b.webp"]
    paths = [_touch(tmp_path / name) for name in names]
    selection = SelectionSet()

    selection.add(paths[:1])
    selection.add(reversed(paths))

    assert selection.paths == (paths[0], paths[2], paths[1])
