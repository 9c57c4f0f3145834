TEXT = "Lorem\nIpsum\nDOLOR\n"


def test_grep_from_stdin(invoke):
    res = invoke(["grep", "or"], input_data=TEXT)
    assert res.exit_code == 0
    assert res.output == "Lorem\n"


def test_grep_insensitive_invert_count(invoke):
    assert invoke(["grep", "-i", "or"], input_data=TEXT).output == "Lorem\nDOLOR\n"
    assert invoke(["grep", "-v", "or"], input_data=TEXT).output == "Ipsum\nDOLOR\n"
    assert invoke(["grep", "-c", "-i", "or"], input_data=TEXT).output == "2\n"


def test_grep_prefixes_names_for_several_files(invoke, three_txt, ten_txt):
    res = invoke(["grep", "e", str(three_txt), str(ten_txt)])
    assert res.exit_code == 0
    lines = res.output.splitlines()
    assert lines[:2] == [f"{three_txt}:one", f"{three_txt}:three"]
    assert lines[2] == f"{ten_txt}:line 1"
    assert len(lines) == 12


def test_grep_count_several_files(invoke, three_txt, empty_txt):
    res = invoke(["grep", "-c", "o", str(three_txt), str(empty_txt)])
    assert res.output == f"{three_txt}:2\n{empty_txt}:0\n"


def test_grep_invalid_pattern(invoke):
    res = invoke(["grep", "("], input_data=TEXT)
    assert res.exit_code == 1
    assert 'Invalid pattern "("' in res.output


def test_grep_directory_needs_recursive(invoke, tmp_path):
    (tmp_path / "a.txt").write_text("fox\n")
    (tmp_path / "sub").mkdir()
    (tmp_path / "sub" / "b.txt").write_text("fox\nowl\n")

    res = invoke(["grep", "fox", str(tmp_path)])
    assert res.exit_code == 0
    assert f"grep: {tmp_path}: Is a directory" in res.output

    res = invoke(["grep", "-r", "fox", str(tmp_path)])
    assert res.exit_code == 0
    assert res.output.splitlines() == [
        f"{tmp_path / 'a.txt'}:fox",
        f"{tmp_path / 'sub' / 'b.txt'}:fox",
    ]


def test_grep_missing_file_continues(invoke, missing_txt, three_txt):
    res = invoke(["grep", "two", str(missing_txt), str(three_txt)])
    assert res.exit_code == 0
    assert f"grep: {missing_txt}: No such file or directory" in res.output
    assert f"{three_txt}:two\n" in res.output
