from zerosetup.common.transaction import TransactionManager


def test_preview_does_not_touch_the_disk(tmp_path):
    (tmp_path / "old.txt").write_text("old")
    tm = TransactionManager(tmp_path)
    tm.add_write("new.txt", "content")
    tm.add_move("old.txt", "moved.txt")
    tm.add_delete_file("gone.txt")

    assert tm.preview() == [
        "[WRITE] new.txt",
        "[MOVE] old.txt -> moved.txt",
        "[DELETE] gone.txt",
    ]
    assert tm.pending_count == 3
    assert not (tmp_path / "new.txt").exists()
    assert (tmp_path / "old.txt").exists()


def test_commit_applies_operations_in_order(tmp_path):
    (tmp_path / "_gitignore").write_text("node_modules\n")
    (tmp_path / ".eslintrc.json").write_text("{}")
    (tmp_path / "cache").mkdir()
    (tmp_path / "cache" / "x").write_text("")

    tm = TransactionManager(tmp_path)
    tm.add_write("nested/dir/file.txt", "hello")
    tm.add_move("_gitignore", ".gitignore")
    tm.add_delete_file(".eslintrc.json")
    tm.add_delete_file("cache")
    tm.add_delete_file("never-existed")
    tm.commit()

    assert (tmp_path / "nested/dir/file.txt").read_text() == "hello"
    assert (tmp_path / ".gitignore").read_text() == "node_modules\n"
    assert not (tmp_path / "_gitignore").exists()
    assert not (tmp_path / ".eslintrc.json").exists()
    assert not (tmp_path / "cache").exists()
    assert tm.pending_count == 0


def test_touched_paths_are_posix_strings(tmp_path):
    tm = TransactionManager(tmp_path)
    tm.add_delete_file(".prettierrc")
    tm.add_write("a/b.json", "{}")

    assert tm.touched_paths() == [".prettierrc", "a/b.json"]
