from lowterms.__main__ import main


def test_main_prints_demo(capsys):
    assert main() == 0
    out = capsys.readouterr().out
    assert out.splitlines() == [
        "a = 4/9",
        "b = 1/2",
        "a + b = ",
        "17/18",
    ]
