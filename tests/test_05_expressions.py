"""Test conversion to postfix notation and evaluation of matrix expressions."""
import pytest
import matcalc as mc


@pytest.mark.parametrize("token,expected", [
    ('2', True), ('-2', True), ('3.25', True), ('-0.5', True), ('.5', True), ('10.', True),
    ('', False), ('-', False), ('.', False), ('1.2.3', False), ('--2', False), ('2-', False),
    ('A', False), ('1e5', False), ('+2', False),
])
def test_is_number(token, expected):
    """Test the numeric literal grammar."""
    assert mc.is_number(token) == expected


def test_is_operator():
    """Test operator recognition."""
    assert all(mc.is_operator(op) for op in '+-*^')
    assert not mc.is_operator('-A')
    assert not mc.is_operator('(')


@pytest.mark.parametrize("tokens,expected", [
    (['A', '+', 'B'], ['A', '+', 'B']),
    (['(A', '+', 'B)', '*', '2'], ['(', 'A', '+', 'B', ')', '*', '2']),
    (['((A', '+', 'B)', '*', 'C)'], ['(', '(', 'A', '+', 'B', ')', '*', 'C', ')']),
    (['(A)'], ['(', 'A', ')']),
    (['(', 'A', ')'], ['(', 'A', ')']),
])
def test_tokenize_math(tokens, expected):
    """Test isolation of parentheses."""
    assert mc.tokenize_math(tokens) == expected


@pytest.mark.parametrize("tokens,expected", [
    (['A', '*', '2', '+', 'B'], ['A', '2', '*', 'B', '+']),
    (['A', '+', 'B', '*', '2'], ['A', 'B', '2', '*', '+']),
    (['(A', '+', 'B)', '*', '2'], ['A', 'B', '+', '2', '*']),
    (['A', '-', 'B', '-', 'C'], ['A', 'B', '-', 'C', '-']),
    (['A', '+', 'B', '^', '2'], ['A', 'B', '2', '^', '+']),
    (['A', '^', '2', '*', 'B'], ['A', '2', '^', 'B', '*']),
    (['A'], ['A']),
])
def test_to_postfix(tokens, expected):
    """Test shunting-yard conversion with precedence and left associativity."""
    assert mc.to_postfix(tokens) == expected


@pytest.mark.parametrize("tokens", [['(A', '+', 'B'], ['A', '+', 'B)'], ['A)', '+', '(B']])
def test_to_postfix_unbalanced(tokens):
    """Test that unbalanced parentheses are reported."""
    with pytest.raises(mc.EvaluationError):
        mc.to_postfix(tokens)


def test_evaluate_precedence(symbols):
    """Test that A * 2 is computed before adding B."""
    result = mc.evaluate(['A', '*', '2', '+', 'B'], symbols)
    assert result.tolist() == [[3, 2], [2, 3]]


def test_evaluate_parentheses(symbols):
    """Test that parentheses override precedence."""
    result = mc.evaluate(['(A', '+', 'B)', '*', '2'], symbols)
    assert result.tolist() == [[4, 2], [2, 4]]


@pytest.mark.parametrize("tokens,expected", [
    (['A', '-', 'B'], [[0, 1], [1, 0]]),
    (['2', '*', 'A'], [[2, 2], [2, 2]]),
    (['D', '*', 'B'], [[1, 2], [3, 4]]),
    (['D', '^', '2'], [[7, 10], [15, 22]]),
    (['D', '^', '0'], [[1, 0], [0, 1]]),
    (['A', '+', '-B'], [[0, 1], [1, 0]]),
    (['-D'], [[-1, -2], [-3, -4]]),
    (['B'], [[1, 0], [0, 1]]),
    (['D', '*', 'C'], [[9, 12, 15], [19, 26, 33]]),
    (['(D', '-', 'B)', '*', '(D', '+', 'B)'], [[6, 10], [15, 21]]),
])
def test_evaluate(symbols, tokens, expected):
    """Test evaluation of valid expressions."""
    assert mc.evaluate(tokens, symbols).tolist() == expected


def test_evaluate_negation_does_not_modify(symbols):
    """Test that a negated operand leaves the stored matrix unchanged."""
    mc.evaluate(['-D'], symbols)
    mc.evaluate(['-D', '*', '2'], symbols)
    assert symbols.lookup('D').tolist() == [[1, 2], [3, 4]]


def test_evaluate_returns_copy(symbols):
    """Test that the result does not alias a stored matrix."""
    result = mc.evaluate(['D'], symbols)
    result[0, 0] = 100
    assert symbols.lookup('D')[0, 0] == 1


@pytest.mark.parametrize("tokens,cause", [
    (['A', '+', 'C'], mc.DimensionMismatch),
    (['C', '*', 'C'], mc.DimensionMismatch),
    (['A', '+', 'X'], mc.UnknownOperand),
    (['A', '^', 'B'], mc.UnsupportedOperation),
    (['2', '*', '3'], mc.UnsupportedOperation),
    (['2', '^', 'A'], mc.UnsupportedOperation),
    (['A', '+', '2'], mc.UnsupportedOperation),
    (['C', '^', '2'], mc.NotSquare),
    (['D', '^', '-1'], mc.UnsupportedOperation),
])
def test_evaluate_errors(symbols, tokens, cause):
    """Test that failures abort with a single evaluation error."""
    with pytest.raises(mc.EvaluationError) as excinfo:
        mc.evaluate(tokens, symbols)
    assert isinstance(excinfo.value.__cause__, cause)


@pytest.mark.parametrize("tokens", [[], ['A', '+'], ['A', 'B'], ['2'], ['+'], ['X']])
def test_evaluate_malformed(symbols, tokens):
    """Test malformed expressions."""
    with pytest.raises(mc.EvaluationError):
        mc.evaluate(tokens, symbols)


def test_evaluate_removes_temporaries(symbols):
    """Test that intermediate results are removed after success and failure."""
    before = set(symbols._matrices)
    mc.evaluate(['A', '*', '2', '+', 'B', '-', 'D'], symbols)
    assert set(symbols._matrices) == before
    with pytest.raises(mc.EvaluationError):
        mc.evaluate(['A', '*', '2', '+', 'C'], symbols)
    assert set(symbols._matrices) == before


def test_do_op(symbols):
    """Test a single binary operation on operand tokens."""
    assert mc.do_op('A', 'B', '+', symbols).tolist() == [[2, 1], [1, 2]]
    assert mc.do_op('3', 'B', '*', symbols).tolist() == [[3, 0], [0, 3]]
    with pytest.raises(mc.UnsupportedOperation):
        mc.do_op('A', 'B', '^', symbols)


@pytest.mark.parametrize("text,expected", [
    ('[[1,2],[3,4]]', [[1, 2], [3, 4]]),
    ('[[1, 2], [3, 4]]', [[1, 2], [3, 4]]),
    ('[[1/2,-3],[0.25,4/8]]', [[0.5, -3], [0.25, 0.5]]),
    ('[[1,2,3]]', [[1, 2, 3]]),
    ('[[1],[2]]', [[1], [2]]),
])
def test_parse_matrix_literal(text, expected):
    """Test translation of matrix literals."""
    assert mc.parse_matrix_literal(text).tolist() == expected


def test_parse_matrix_literal_empty():
    """Test the empty literal."""
    assert mc.parse_matrix_literal('[]').is_empty()


@pytest.mark.parametrize("text,message", [
    ('[[1,2],[3,4]', "Missing ]"),
    ('[[1,2]],[3,4]]', "Missing ["),
])
def test_parse_matrix_literal_unbalanced(text, message):
    """Test messages for unbalanced brackets."""
    with pytest.raises(mc.ParseError) as excinfo:
        mc.parse_matrix_literal(text)
    assert str(excinfo.value) == message


@pytest.mark.parametrize("text", ['[[1,2],[3]]', '[[1,a]]', '[[1,2][3,4]]', '[1,2]', '[[1,,2]]', '[[1/0]]'])
def test_parse_matrix_literal_invalid(text):
    """Test rejection of malformed literals."""
    with pytest.raises(mc.ParseError):
        mc.parse_matrix_literal(text)


def test_parse_number():
    """Test decimal and fraction parsing."""
    assert mc.parse_number('1/4') == 0.25
    assert mc.parse_number('-2.5') == -2.5
    with pytest.raises(mc.ParseError):
        mc.parse_number('x')


def test_parse_number_too_large():
    """Test that numbers beyond the float range are parse errors."""
    with pytest.raises(mc.ParseError):
        mc.parse_number('1e400')
    with pytest.raises(mc.ParseError):
        mc.parse_number('1' * 400)
    with pytest.raises(mc.ParseError):
        mc.parse_matrix_literal('[[1e400]]')
