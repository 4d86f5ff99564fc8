"""Statement parsing utilities for golox.

These functions operate on a `loxlang.parser.parser.Parser` instance and
handle the various statement forms in the language such as declarations,
blocks, conditionals, loops, and function definitions.

Loop and conditional bodies must be blocks. ``for`` loops are desugared
here into a ``While`` wrapped in a scope-introducing ``For`` container.


File: statements.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.1
License: MIT
"""

from typing import TYPE_CHECKING

from loxlang import nodes
from loxlang.exceptions import LoxParseError
from loxlang.tokens import Token, TokenType

from .expressions import MAX_ARGUMENTS

if TYPE_CHECKING:
    from loxlang.parser import Parser


def parse_declaration(parser: 'Parser') -> nodes.Stmt | None:
    """
    Parse a declaration or statement.

    Syntax:
        <classDecl> | <funDecl> | <varDecl> | <statement>

    Args:
        parser: The parser instance.

    Returns:
        The statement node, or None when a syntax error forced the parser
        to synchronise.
    """
    try:
        if parser.match(TokenType.CLASS):
            return parse_class_declaration(parser)
        if parser.match(TokenType.FN):
            return parser.function("function")
        if parser.match(TokenType.VAR):
            return parse_var_declaration(parser)
        return parser.statement()
    except LoxParseError:
        parser.synchronize()
        return None


def parse_class_declaration(parser: 'Parser') -> nodes.Class:
    """
    Parse a class declaration.

    Syntax:
        class <identifier> { <method>* }
    """
    name = parser.eat(TokenType.IDENTIFIER, "Expect class name.")
    parser.eat(TokenType.LEFT_BRACE, "Expect '{' before class body.")

    methods = []
    while not parser.check(TokenType.RIGHT_BRACE) and not parser.is_at_end():
        methods.append(parser.function("method"))

    parser.eat(TokenType.RIGHT_BRACE, "Expect '}' after class body.")
    return nodes.Class(name, methods)


def parse_function(parser: 'Parser', kind: str) -> nodes.Function:
    """
    Parse a function definition. ``kind`` ("function" or "method") only
    changes the wording of error messages.

    Syntax:
        <identifier> ( <params>? ) { <statement>* }
    """
    name = parser.eat(TokenType.IDENTIFIER, f"Expect {kind} name.")
    parser.eat(TokenType.LEFT_PAREN, f"Expect '(' after {kind} name.")

    params: list[Token] = []
    if not parser.check(TokenType.RIGHT_PAREN):
        while True:
            if len(params) >= MAX_ARGUMENTS:
                parser.error(parser.curr_token, f"Can't have more than {MAX_ARGUMENTS} parameters.")
            params.append(parser.eat(TokenType.IDENTIFIER, "Expect parameter name."))
            if not parser.match(TokenType.COMMA):
                break
    parser.eat(TokenType.RIGHT_PAREN, "Expect ')' after parameters.")

    parser.eat(TokenType.LEFT_BRACE, f"Expect '{{' before {kind} body.")
    body = parser.block_statements()
    return nodes.Function(name, params, body)


def parse_var_declaration(parser: 'Parser') -> nodes.Var:
    """
    Parse a variable declaration.

    Syntax:
        var <identifier> ( = <expression> )? ;
    """
    name = parser.eat(TokenType.IDENTIFIER, "Expect variable name.")
    initializer = None
    if parser.match(TokenType.EQUAL):
        initializer = parser.expression()
    parser.eat(TokenType.SEMICOLON, "Expect ';' after variable declaration.")
    return nodes.Var(name, initializer)


def parse_statement(parser: 'Parser') -> nodes.Stmt:
    """
    Parse a single statement.

    Args:
        parser: The parser instance.

    Returns:
        The statement node.
    """
    if parser.check(TokenType.IDENTIFIER) and parser.peek_next().type == TokenType.COLON:
        return parse_labeled_loop(parser)
    if parser.match(TokenType.FOR):
        return parse_for(parser)
    if parser.match(TokenType.IF):
        return parse_if(parser)
    if parser.match(TokenType.PRINT):
        return parse_print(parser)
    if parser.match(TokenType.RETURN):
        return parse_return(parser)
    if parser.match(TokenType.WHILE):
        return parse_while(parser)
    if parser.match(TokenType.BREAK):
        return nodes.Break(*_parse_jump(parser))
    if parser.match(TokenType.CONTINUE):
        return nodes.Continue(*_parse_jump(parser))
    if parser.match(TokenType.LEFT_BRACE):
        return nodes.Block(parser.block_statements())
    return parse_expression_statement(parser)


def parse_block(parser: 'Parser') -> nodes.Block:
    """
    Parse the mandatory block body of a control-flow statement.

    Syntax:
        { <declaration>* }
    """
    if not parser.check(TokenType.LEFT_BRACE):
        raise parser.error(parser.curr_token, "Expect block.")
    parser.advance()
    return nodes.Block(parser.block_statements())


def parse_block_statements(parser: 'Parser') -> list[nodes.Stmt]:
    """
    Parse declarations until the closing brace, which is consumed.
    """
    statements = []
    while not parser.check(TokenType.RIGHT_BRACE) and not parser.is_at_end():
        stmt = parser.declaration()
        if stmt is not None:
            statements.append(stmt)
    parser.eat(TokenType.RIGHT_BRACE, "Expect '}' after block.")
    return statements


def parse_labeled_loop(parser: 'Parser') -> nodes.Stmt:
    """
    Parse a loop preceded by a label.

    Syntax:
        <identifier> : ( <while> | <for> )
    """
    label = parser.advance()
    parser.advance()  # ':'
    if parser.match(TokenType.WHILE):
        return parse_while(parser, label)
    if parser.match(TokenType.FOR):
        return parse_for(parser, label)
    raise parser.error(parser.curr_token, "Expect loop after label.")


def parse_if(parser: 'Parser') -> nodes.If:
    """
    Parse an 'if' conditional statement.

    Syntax:
        if <expression> { ... } ( else ( <if> | { ... } ) )?
    """
    condition = parser.expression()
    then_branch = parser.block()
    else_branch = None
    if parser.match(TokenType.ELSE):
        if parser.match(TokenType.IF):
            else_branch = parse_if(parser)
        else:
            else_branch = parser.block()
    return nodes.If(condition, then_branch, else_branch)


def parse_while(parser: 'Parser', label: Token | None = None) -> nodes.While:
    """
    Parse a 'while' loop.

    Syntax:
        while <expression> { ... }
    """
    keyword = parser.previous()
    condition = parser.expression()
    body = parser.block()
    return nodes.While(keyword, condition, body, label)


def parse_for(parser: 'Parser', label: Token | None = None) -> nodes.For:
    """
    Parse a 'for' loop and desugar it into a while loop.

    Syntax:
        for ( <init>? ; <cond>? ; <incr>? ) { ... }

    The header parentheses are optional. The result is equivalent to
    ``{ init; while (cond) { body; incr; } }`` with the increment kept on the
    ``While`` node so that ``continue`` still runs it.
    """
    keyword = parser.previous()
    wrapped = parser.match(TokenType.LEFT_PAREN)

    initializer: nodes.Stmt | None
    if parser.match(TokenType.SEMICOLON):
        initializer = None
    elif parser.match(TokenType.VAR):
        initializer = parse_var_declaration(parser)
    else:
        initializer = parse_expression_statement(parser)

    condition = None
    if not parser.check(TokenType.SEMICOLON):
        condition = parser.expression()
    parser.eat(TokenType.SEMICOLON, "Expect ';' after loop condition.")

    increment = None
    if not parser.check(TokenType.RIGHT_PAREN if wrapped else TokenType.LEFT_BRACE):
        increment = parser.expression()
    if wrapped:
        parser.eat(TokenType.RIGHT_PAREN, "Expect ')' after for clauses.")

    body = parser.block()

    if condition is None:
        condition = nodes.Literal(True)
    loop = nodes.While(keyword, condition, body, label, increment)

    statements: list[nodes.Stmt] = [loop]
    if initializer is not None:
        statements.insert(0, initializer)
    return nodes.For(keyword, nodes.Block(statements))


def parse_print(parser: 'Parser') -> nodes.Print:
    """
    Parse a 'print' statement used for output.

    Syntax:
        print <expression> ;
    """
    value = parser.expression()
    parser.eat(TokenType.SEMICOLON, "Expect ';' after value.")
    return nodes.Print(value)


def parse_return(parser: 'Parser') -> nodes.Return:
    """
    Parse a 'return' statement from within a function.

    Syntax:
        return <expression>? ;
    """
    keyword = parser.previous()
    value = None
    if not parser.check(TokenType.SEMICOLON):
        value = parser.expression()
    parser.eat(TokenType.SEMICOLON, "Expect ';' after return value.")
    return nodes.Return(keyword, value)


def _parse_jump(parser: 'Parser') -> tuple[Token, Token | None]:
    keyword = parser.previous()
    label = None
    if parser.check(TokenType.IDENTIFIER):
        label = parser.advance()
    parser.eat(TokenType.SEMICOLON, f"Expect ';' after '{keyword.lexeme}'.")
    return keyword, label


def parse_expression_statement(parser: 'Parser') -> nodes.Expression:
    """
    Parse an expression evaluated for its side effects.

    Syntax:
        <expression> ;
    """
    expr = parser.expression()
    parser.eat(TokenType.SEMICOLON, "Expect ';' after expression.")
    return nodes.Expression(expr)
