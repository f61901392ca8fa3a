import pytest

from zdkit.cmdline import CmdOption, CommandLine, CommandLineError, OptType

SOURCE_ARGV = [
    "./zd_cmdl", "a", "b", "c",
    "-opt1", "val1_1", "val1_2", "-opt2", "-opt3", "val3_1", "-opt4",
]

COMPILER_ARGV = (
    "./zd_cmdl nothing here -Wall -Wextra -std=c11 -I ../src/ -I./ "
    "-o a a.c b.c -L. -L ../lib/ -l nil -lm"
).split()


@pytest.fixture
def plain():
    return CommandLine(True).build(SOURCE_ARGV)


def _compiler():
    cmdl = CommandLine(True)
    cmdl.define(OptType.NO_ARG, None, "Wall", None)
    cmdl.define(OptType.NO_ARG, None, "Wextra", None)
    for name in ("std", "I", "o", "L", "l"):
        cmdl.define(OptType.SINGLE_ARG, None, name, None)
    return cmdl


def _make_rules():
    cmdl = CommandLine(True)
    cmdl.define(OptType.NO_ARG, "help", "h", "print help information")
    cmdl.define(OptType.NO_ARG, "compile", "c", "compile all files")
    cmdl.define(OptType.NO_ARG, "clean", "cl", "clean the generated files")
    return cmdl


def test_program(plain):
    assert plain.program == "./zd_cmdl"


def test_opts_count(plain):
    assert len(plain.opts) == 4


def test_pargs(plain):
    assert plain.pargs == ["a", "b", "c"]


def test_opts(plain):
    names = [opt.name for opt in plain.opts]
    assert names == ["opt1", "opt2", "opt3", "opt4"]
    assert plain.opts[0].vals == ["val1_1", "val1_2"]
    assert plain.opts[1].vals == []
    assert plain.opts[2].vals == ["val3_1"]
    assert plain.opts[3].vals == []
    assert all(opt.type is OptType.MULTI_ARG for opt in plain.opts)
    assert not any(opt.is_defined for opt in plain.opts)


def test_get_opt(plain):
    opt = plain.get_opt("opt1")
    assert opt is not None
    assert opt.vals == ["val1_1", "val1_2"]
    assert plain.get_opt("opt6") is None
    assert plain.get_opt(None) is None


def test_compiler_example():
    cmdl = _compiler().build(COMPILER_ARGV)
    assert cmdl.pargs == ["nothing", "here"]
    summary = [(o.name, o.type, o.vals, o.pargs) for o in cmdl.opts]
    assert summary == [
        ("Wall", OptType.NO_ARG, [], []),
        ("Wextra", OptType.NO_ARG, [], []),
        ("std", OptType.SINGLE_ARG, ["c11"], []),
        ("I", OptType.SINGLE_ARG, ["../src/", "./"], []),
        ("o", OptType.SINGLE_ARG, ["a"], ["a.c", "b.c"]),
        ("L", OptType.SINGLE_ARG, [".", "../lib/"], []),
        ("l", OptType.SINGLE_ARG, ["nil", "m"], []),
    ]
    assert all(o.is_defined for o in cmdl.opts)


def test_compiler_example_without_merge():
    cmdl = CommandLine(False)
    cmdl.define(OptType.SINGLE_ARG, None, "I", None)
    cmdl.build(["prog", "-I", "../src/", "-I./"])
    assert [o.vals for o in cmdl.opts] == [["../src/"], ["./"]]


def test_isuse_long_and_short():
    cmdl = _make_rules().build(["./make", "-c"])
    assert cmdl.isuse("compile") is True
    assert cmdl.isuse("c") is True
    assert cmdl.isuse("clean") is False
    assert cmdl.isuse("help") is False
    assert cmdl.isuse(None) is False


def test_longest_prefix_wins():
    cmdl = _make_rules().build(["./make", "-cl"])
    assert cmdl.isuse("clean") is True
    assert cmdl.isuse("compile") is False


def test_long_form():
    cmdl = _make_rules().build(["./make", "--help"])
    assert cmdl.opts[0].name == "help"
    assert cmdl.isuse("h") is True


def test_merge_long_and_short_forms():
    cmdl = _make_rules().build(["./make", "-c", "x", "--compile", "y"])
    assert len(cmdl.opts) == 1
    assert cmdl.opts[0].pargs == ["x", "y"]


def test_wrong_dash_count_raises():
    with pytest.raises(CommandLineError, match="'--c' is invalid"):
        _make_rules().build(["./make", "--c"])
    with pytest.raises(CommandLineError, match="'-help' is invalid"):
        _make_rules().build(["./make", "-help"])


def test_single_arg_missing_value():
    cmdl = CommandLine()
    cmdl.define(OptType.SINGLE_ARG, None, "o", None)
    with pytest.raises(CommandLineError, match="should receive one argument"):
        cmdl.build(["prog", "-o"])


def test_single_arg_followed_by_option():
    cmdl = CommandLine()
    cmdl.define(OptType.SINGLE_ARG, None, "o", None)
    with pytest.raises(CommandLineError, match="'-x' should be an argument of option 'o'"):
        cmdl.build(["prog", "-o", "-x"])


def test_undefined_option_with_equals():
    cmdl = CommandLine().build(["prog", "--name=value", "rest", "--flag="])
    first, second = cmdl.opts
    assert (first.name, first.type, first.vals, first.pargs) == (
        "name", OptType.SINGLE_ARG, ["value"], ["rest"]
    )
    assert (second.name, second.vals) == ("flag", [])


def test_no_merge_keeps_repeats():
    cmdl = CommandLine(False).build(["prog", "-a", "1", "-a", "2"])
    assert [(o.name, o.vals) for o in cmdl.opts] == [("a", ["1"]), ("a", ["2"])]


def test_merge_folds_repeats():
    cmdl = CommandLine(True).build(["prog", "-a", "1", "-a", "2"])
    assert [(o.name, o.vals) for o in cmdl.opts] == [("a", ["1", "2"])]


def test_bare_dashes_are_skipped():
    cmdl = CommandLine().build(["prog", "--"])
    assert cmdl.opts == []


def test_empty_argv_raises():
    with pytest.raises(CommandLineError):
        CommandLine().build([])


def test_define_rejects_bad_rules():
    cmdl = CommandLine()
    assert cmdl.define(5, "x", "y", "z") is False
    assert cmdl.define(OptType.NO_ARG, None, None, "z") is False
    assert cmdl.rules == []


def test_define_fills_missing_names():
    cmdl = CommandLine()
    assert cmdl.define(OptType.NO_ARG, "clean", None, None) is True
    rule = cmdl.rules[0]
    assert (rule.lname, rule.sname, rule.description) == ("clean", "@@", "@@")


def test_usage(capsys):
    cmdl = _make_rules().build(["./make"])
    text = cmdl.usage()
    expected = (
        "Usage: ./make ...\n"
        "  -h --help" + " " * 12 + "print help information\n"
        "  -c --compile" + " " * 9 + "compile all files\n"
        "  -cl --clean" + " " * 10 + "clean the generated files\n"
    )
    assert text == expected
    assert capsys.readouterr().err == expected


def test_dump(plain, capsys):
    text = plain.dump()
    assert text.startswith("<program>: ./zd_cmdl\n<pargs>:\n\tpargs[0]: a\n")
    assert (
        "\topts[0]:\n\t\t<name>: opt1\n\t\t<type>: MULTI ARG\n"
        "\t\t<rule>: false\n\t\t<vals>:\n\t\t\tvals[0]: val1_1\n"
    ) in text
    assert "\t\t<name>: opt2\n\t\t<type>: MULTI ARG\n\t\t<rule>: false\n\t\t<vals>: EMPTY\n" in text
    assert capsys.readouterr().err == text


def test_dump_empty(capsys):
    text = CommandLine().build(["prog"]).dump()
    assert text == "<program>: prog\n<pargs>: EMPTY\n<opts>: EMPTY\n"


def test_option_dump_level():
    opt = CmdOption(type=OptType.SINGLE_ARG, is_defined=True, name="o", vals=["a"])
    text = opt.dump(1)
    assert text.splitlines() == [
        "\t<name>: o",
        "\t<type>: SINGLE ARG",
        "\t<rule>: true",
        "\t<vals>:",
        "\t\tvals[0]: a",
        "\t<pargs>: EMPTY",
    ]