def test_tail_defaults_to_last_ten_lines(invoke):
    data = "".join(f"{i}\n" for i in range(20))
    res = invoke(["tail"], input_data=data)
    assert res.exit_code == 0
    assert res.output.splitlines() == [str(i) for i in range(10, 20)]


def test_tail_last_lines(invoke, three_txt):
    res = invoke(["tail", "-n", "2", str(three_txt)])
    assert res.exit_code == 0
    assert res.output == "two\nthree\n"


def test_tail_from_line(invoke, three_txt):
    res = invoke(["tail", "-n", "+2", str(three_txt)])
    assert res.output == "two\nthree\n"


def test_tail_plus_zero_is_whole_file(invoke, three_txt):
    res = invoke(["tail", "-n", "+0", str(three_txt)])
    assert res.output == "one\ntwo\nthree\n"


def test_tail_zero_lines(invoke, three_txt):
    res = invoke(["tail", "-n", "0", str(three_txt)])
    assert res.exit_code == 0
    assert res.output == ""


def test_tail_bytes(invoke):
    res = invoke(["tail", "-c", "3"], input_data="hello\n")
    assert res.output == "lo\n"


def test_tail_bytes_from_start(invoke):
    res = invoke(["tail", "-c", "+2"], input_data="hello\n")
    assert res.output == "ello\n"


def test_tail_keeps_missing_final_newline(invoke):
    res = invoke(["tail", "-n", "1"], input_data="a\nb")
    assert res.output == "b"


def test_tail_banners_and_quiet(invoke, three_txt, ten_txt):
    res = invoke(["tail", "-n", "1", str(three_txt), str(ten_txt)])
    assert res.output == (
        f"==> {three_txt} <==\nthree\n\n==> {ten_txt} <==\nline 10\n"
    )

    res = invoke(["tail", "-q", "-n", "1", str(three_txt), str(ten_txt)])
    assert res.output == "three\nline 10\n"


def test_tail_missing_file_continues(invoke, missing_txt, three_txt):
    res = invoke(["tail", "-n", "1", str(missing_txt), str(three_txt)])
    assert res.exit_code == 0
    assert f"tail: {missing_txt}: No such file or directory" in res.output
    assert "three\n" in res.output
