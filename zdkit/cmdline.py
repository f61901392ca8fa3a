"""Command-line parsing driven by optional rules with long and short names."""

from __future__ import annotations

import enum
import sys
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence, Tuple

from zdkit.wildcard import wildcard_match

_PLACEHOLDER = "@@"


class OptType(enum.IntEnum):
    """How many values an option takes."""

    NO_ARG = 0
    SINGLE_ARG = 1
    MULTI_ARG = 2

    @property
    def label(self) -> str:
        return self.name.replace("_", " ")


class CommandLineError(ValueError):
    """Raised when the arguments break a defined rule."""


def _type_label(kind: object) -> str:
    try:
        return OptType(kind).label
    except ValueError:
        return "UNKNOWN"


def _render_list(indent: str, title: str, items: Sequence[str]) -> List[str]:
    if not items:
        return [f"{indent}<{title}>: EMPTY"]
    lines = [f"{indent}<{title}>:"]
    lines.extend(f"{indent}\t{title}[{i}]: {item}" for i, item in enumerate(items))
    return lines


@dataclass
class CmdOption:
    """A parsed option, or a rule describing one.

    ``vals`` are the option's own values and ``pargs`` the positional
    arguments that follow them. Rules carry ``lname``, ``sname`` and
    ``description``.
    """

    type: OptType = OptType.NO_ARG
    is_defined: bool = False
    name: str = ""
    vals: List[str] = field(default_factory=list)
    pargs: List[str] = field(default_factory=list)
    lname: str = ""
    sname: str = ""
    description: str = ""

    def _render(self, level: int) -> str:
        indent = "\t" * level
        lines = [
            f"{indent}<name>: {self.name}",
            f"{indent}<type>: {_type_label(self.type)}",
            f"{indent}<rule>: {'true' if self.is_defined else 'false'}",
        ]
        lines += _render_list(indent, "vals", self.vals)
        lines += _render_list(indent, "pargs", self.pargs)
        return "\n".join(lines) + "\n"

    def dump(self, level: int = 0) -> str:
        """Write a description indented by ``level`` tabs to stderr; return it."""
        text = self._render(level)
        sys.stderr.write(text)
        return text


class CommandLine:
    """Splits an argument list into positional arguments and options.

    Options matching a defined rule take values according to the rule's
    type; any other option takes every following plain argument. With
    ``merge_opt`` repeated options are folded into the first occurrence.
    """

    def __init__(self, merge_opt: bool = True) -> None:
        self.program = ""
        self.pargs: List[str] = []
        self.opts: List[CmdOption] = []
        self.rules: List[CmdOption] = []
        self.merge_opt = merge_opt

    def define(
        self,
        opt_type: OptType | int,
        lname: Optional[str] = None,
        sname: Optional[str] = None,
        description: Optional[str] = None,
    ) -> bool:
        """Add a rule; False (and nothing added) for a bad type or no name."""
        try:
            kind = OptType(opt_type)
        except ValueError:
            return False
        if lname is None and sname is None:
            return False
        self.rules.append(
            CmdOption(
                type=kind,
                lname=_PLACEHOLDER if lname is None else lname,
                sname=_PLACEHOLDER if sname is None else sname,
                description=_PLACEHOLDER if description is None else description,
            )
        )
        return True

    def _get_rule(self, optname: str) -> Tuple[Optional[CmdOption], bool]:
        """Return the rule whose name is the longest prefix of ``optname``."""
        best: Optional[CmdOption] = None
        best_len = 0
        is_short = False
        for rule in self.rules:
            for name, short in ((rule.lname, False), (rule.sname, True)):
                if wildcard_match(optname, name + "*") and len(name) > best_len:
                    best, best_len, is_short = rule, len(name), short
        return best, is_short

    @staticmethod
    def _take_plain(args: Sequence[str], pos: int, into: List[str]) -> int:
        while pos < len(args) and not args[pos].startswith("-"):
            into.append(args[pos])
            pos += 1
        return pos

    def _parse_option(
        self, args: Sequence[str], pos: int, body: str, one_dash: bool
    ) -> Tuple[CmdOption, int]:
        rule, is_short = self._get_rule(body)
        if rule is not None and is_short != one_dash:
            dashes = "-" if one_dash else "--"
            raise CommandLineError(f"'{dashes}{body}' is invalid")

        opt = CmdOption()
        if rule is not None:
            opt.is_defined = True
            opt.type = rule.type
            opt.name = rule.sname if is_short else rule.lname

        name, equal, value = body.partition("=")
        if equal:
            if rule is None:
                opt.name = name
                opt.type = OptType.SINGLE_ARG
            if value:
                opt.vals.append(value)
            return opt, pos

        if rule is not None:
            rest = body[len(opt.name):]
            if rest:
                opt.vals.append(rest)
        else:
            opt.name = body
            opt.type = OptType.MULTI_ARG

        if opt.type is OptType.SINGLE_ARG and not opt.vals:
            if pos >= len(args):
                raise CommandLineError(
                    f"option '{opt.name}' should receive one argument"
                )
            if args[pos].startswith("-"):
                raise CommandLineError(
                    f"'{args[pos]}' should be an argument of option '{opt.name}'"
                )
            opt.vals.append(args[pos])
            pos += 1
        elif opt.type is OptType.MULTI_ARG:
            pos = self._take_plain(args, pos, opt.vals)
        return opt, pos

    def _matches(self, opt: CmdOption, optname: str) -> bool:
        if opt.is_defined:
            rule, _ = self._get_rule(opt.name)
            return rule is not None and optname in (rule.lname, rule.sname)
        return opt.name == optname

    def _store(self, opt: CmdOption) -> None:
        if self.merge_opt and self.isuse(opt.name):
            saved = next((o for o in self.opts if o.name == opt.name), None)
            if saved is None:
                saved = next(o for o in self.opts if self._matches(o, opt.name))
            saved.vals.extend(opt.vals)
            saved.pargs.extend(opt.pargs)
        else:
            self.opts.append(opt)

    def build(self, argv: Optional[Iterable[str]] = None) -> "CommandLine":
        """Parse ``argv`` (``sys.argv`` by default); the first item is the program."""
        args = list(sys.argv if argv is None else argv)
        if not args:
            raise CommandLineError("argument list has no program name")
        self.program = args[0]
        pos = self._take_plain(args, 1, self.pargs)

        while pos < len(args):
            arg = args[pos]
            pos += 1
            one_dash = not arg.startswith("--")
            body = arg.lstrip("-")
            if not body:
                continue
            opt, pos = self._parse_option(args, pos, body, one_dash)
            pos = self._take_plain(args, pos, opt.pargs)
            self._store(opt)
        return self

    def usage(self) -> str:
        """Write the list of rules to stderr and return it."""
        lines = [f"Usage: {self.program} ..."]
        for rule in self.rules:
            name = f"-{rule.sname} --{rule.lname}"
            lines.append(f"  {name:<20} {rule.description}")
        text = "\n".join(lines) + "\n"
        sys.stderr.write(text)
        return text

    def isuse(self, optname: Optional[str]) -> bool:
        """Whether an option with this name (or its rule's other name) was given."""
        if optname is None:
            return False
        return any(self._matches(opt, optname) for opt in self.opts)

    def get_opt(self, optname: Optional[str]) -> Optional[CmdOption]:
        """Return the first parsed option called ``optname``, or None."""
        if not optname:
            return None
        for opt in self.opts:
            if optname in (name for name in (opt.name, opt.lname, opt.sname) if name):
                return opt
        return None

    def dump(self) -> str:
        """Write the parsed program, arguments and options to stderr; return it."""
        parts = [f"<program>: {self.program}\n"]
        parts.append("\n".join(_render_list("", "pargs", self.pargs)) + "\n")
        if self.opts:
            parts.append("<opts>:\n")
            for i, opt in enumerate(self.opts):
                parts.append(f"\topts[{i}]:\n")
                parts.append(opt._render(2))
        else:
            parts.append("<opts>: EMPTY\n")
        text = "".join(parts)
        sys.stderr.write(text)
        return text