"""Recursive-descent parser for mover programs.

Grammar:

    Program    := "new" "MoverBuilder" "(" ")" MoverCall* ";"?
    MoverCall  := "." MethodName "(" Number "," Ident "=" ">" Ident PathCall* ")"
    PathCall   := "." PathMethod "(" Args ")"
    Vector     := "new" "Vector2" "(" Number "," Number ")"

``parse`` never raises: it returns a Program, or the message of the first
production that failed.
"""

from __future__ import annotations

import logging
import math

from path_mover.program import Program
from path_mover.tokenizer import IdentifierToken, NumberToken, OperatorToken, Token, Tokenizer
from path_mover.types import (
    ArcContinueStatement,
    ArcStatement,
    BezierContinueStatement,
    BezierStatement,
    LineContinueStatement,
    LineStatement,
    MoverMethod,
    MoverStatement,
    PathStatement,
    StartStatement,
    Vector2,
)

logger = logging.getLogger(__name__)

MOVER_METHODS = {method.value: method for method in MoverMethod}


class ParseError(Exception):
    """First failing production; carries the user-facing message."""


class Parser:
    """Single-pass parser with one token of lookahead."""

    def __init__(self, content: str) -> None:
        self.tokenizer = Tokenizer(content)
        self._lookahead: Token | None = None

    def peek(self) -> Token | None:
        if self._lookahead is None:
            self._lookahead = self.tokenizer.next_token()
        return self._lookahead

    def consume(self) -> Token | None:
        token = self.peek()
        self._lookahead = None
        return token

    def _is_operator(self, token: Token | None, value: str) -> bool:
        return isinstance(token, OperatorToken) and token.value == value

    def expect_identifier(self, value: str, message: str | None = None) -> None:
        token = self.consume()
        if not (isinstance(token, IdentifierToken) and token.value == value):
            raise ParseError(message or f"Expected '{value}'")

    def expect_operator(self, value: str) -> None:
        if not self._is_operator(self.consume(), value):
            raise ParseError(f"Expected '{value}'")

    def want_identifier(self, message: str) -> str:
        token = self.consume()
        if not isinstance(token, IdentifierToken):
            raise ParseError(message)
        return token.value

    def want_number(self, message: str) -> float:
        token = self.consume()
        if not isinstance(token, NumberToken):
            raise ParseError(message)
        if not math.isfinite(token.value):
            raise ParseError("Expected finite number")
        return token.value

    def want_segments(self, method: str) -> int:
        value = self.want_number(f"Expected number argument for {method} segments")
        if value < 1 or not value.is_integer():
            raise ParseError(f"Expected positive whole number for {method} segments")
        return int(value)

    def want_vector(self, context: str) -> Vector2:
        try:
            self.expect_identifier("new", "Expected Vector2 'new'")
            self.expect_identifier("Vector2")
            self.expect_operator("(")
            x = self.want_number("Expected number for x")
            self.expect_operator(",")
            y = self.want_number("Expected number for y")
            self.expect_operator(")")
        except ParseError as e:
            raise ParseError(f"Expected {context}: {e}") from e
        return Vector2(x=x, y=y)

    def parse_path_call(self) -> PathStatement:
        self.expect_operator(".")
        method = self.want_identifier("Expected method name")
        self.expect_operator("(")

        statement: PathStatement
        match method:
            case "Start":
                statement = StartStatement(start=self.want_vector("Start"))
            case "Line":
                statement = LineStatement(end=self.want_vector("Line"))
            case "LineContinue":
                length = self.want_number("Expected number argument for LineContinue")
                statement = LineContinueStatement(length=length)
            case "Arc":
                center = self.want_vector("Arc")
                self.expect_operator(",")
                angle = self.want_number("Expected number argument for Arc")
                statement = ArcStatement(center=center, angle=angle)
            case "ArcContinue":
                radius = self.want_number("Expected number argument for ArcContinue")
                self.expect_operator(",")
                angle = self.want_number("Expected number argument for ArcContinue")
                statement = ArcContinueStatement(radius=radius, angle=angle)
            case "Bezier":
                c1 = self.want_vector("Bezier c1")
                self.expect_operator(",")
                c2 = self.want_vector("Bezier c2")
                self.expect_operator(",")
                end = self.want_vector("Bezier end")
                self.expect_operator(",")
                segments = self.want_segments("Bezier")
                statement = BezierStatement(c1=c1, c2=c2, end=end, segments=segments)
            case "BezierContinue":
                c1_offset = self.want_number(
                    "Expected number argument for BezierContinue c1Offset"
                )
                self.expect_operator(",")
                c2 = self.want_vector("BezierContinue c2")
                self.expect_operator(",")
                end = self.want_vector("BezierContinue end")
                self.expect_operator(",")
                segments = self.want_segments("BezierContinue")
                statement = BezierContinueStatement(
                    c1_offset=c1_offset, c2=c2, end=end, segments=segments
                )
            case _:
                raise ParseError(f"Unknown method name: {method}")

        self.expect_operator(")")
        return statement

    def parse_mover_call(self) -> MoverStatement:
        self.expect_operator(".")
        name = self.want_identifier("Expected method name")
        method = MOVER_METHODS.get(name)
        if method is None:
            raise ParseError(f"Unknown method name: {name}")
        self.expect_operator("(")
        duration = self.want_number("Expected duration number")
        if duration < 0:
            raise ParseError("Expected non-negative duration")
        self.expect_operator(",")
        parameter = self.want_identifier("Expected placeholder identifier")
        self.expect_operator("=")
        self.expect_operator(">")
        echo = self.want_identifier("Expected placeholder identifier")
        if parameter != echo:
            raise ParseError("Placeholder identifiers do not match")

        path_statements: list[PathStatement] = []
        while True:
            token = self.peek()
            if token is None:
                raise ParseError("Unexpected end of input in method body")
            if self._is_operator(token, ")"):
                self.consume()
                break
            path_statements.append(self.parse_path_call())

        return MoverStatement(
            method=method, duration=duration, path_statements=tuple(path_statements)
        )

    def parse_program(self) -> Program:
        self.expect_identifier("new")
        self.expect_identifier("MoverBuilder")
        self.expect_operator("(")
        self.expect_operator(")")

        movers: list[MoverStatement] = []
        while True:
            token = self.peek()
            if token is None:
                break
            if self._is_operator(token, ";"):
                self.consume()
                break
            movers.append(self.parse_mover_call())

        return Program(movers=tuple(movers))


def parse(text: str) -> Program | str:
    """Parse program text into a Program, or return an error message."""
    try:
        return Parser(text).parse_program()
    except ParseError as e:
        logger.debug(f"Parse failed: {e}")
        return str(e)


__all__ = ["ParseError", "Parser", "parse"]
