import pytest

from recase import InvalidArgumentError, split_words, to_camel_case, to_dot_case, to_kebab_case

NON_STRINGS = [None, 123, 1.5, {}, [], b"bytes", ("a",)]


def test_split_words():
    assert split_words("  user--name__test ") == ["user", "name", "test"]
    assert split_words("hello\tworld\nagain") == ["hello", "world", "again"]
    assert split_words("-_- -") == []


@pytest.mark.parametrize(
    "content, expected",
    [
        ("hello world", "helloWorld"),
        ("Hello World", "helloWorld"),
        ("hello-world", "helloWorld"),
        ("hello_world", "helloWorld"),
        ("hello-world_test", "helloWorldTest"),
        ("  hello   world  ", "helloWorld"),
        ("HELLO-WORLD", "helloWorld"),
        ("user--name__test", "userNameTest"),
        ("user_name-test", "userNameTest"),
        ("A", "a"),
        ("A_B_C", "aBC"),
        ("a--b__c", "aBC"),
        ("tHis_is-A tEsT", "thisIsATest"),
        ("hello\tworld", "helloWorld"),
        ("", ""),
        ("   ", ""),
        ("---", ""),
        ("__", ""),
        ("-_-_-", ""),
    ],
)
def test_to_camel_case(content, expected):
    assert to_camel_case(content) == expected


@pytest.mark.parametrize(
    "content, expected",
    [
        ("hello world", "hello.world"),
        ("Hello-World_test", "hello.world.test"),
        ("  HELLO   WORLD  ", "hello.world"),
        ("a--b__c", "a.b.c"),
        ("hello.world", "hello.world"),
        ("", ""),
        (" -_ ", ""),
    ],
)
def test_to_dot_case(content, expected):
    assert to_dot_case(content) == expected


@pytest.mark.parametrize(
    "content, expected",
    [
        ("myVariableName", "my-variable-name"),
        ("MyVariableName", "my-variable-name"),
        ("XMLHttpRequest", "xml-http-request"),
        ("getHTTPResponse", "get-http-response"),
        ("version2Update", "version2-update"),
        ("ABC", "abc"),
        ("simple", "simple"),
        ("", ""),
        ("   ", ""),
    ],
)
def test_to_kebab_case(content, expected):
    assert to_kebab_case(content) == expected


def test_kebab_keeps_existing_delimiters():
    assert to_kebab_case("my-variableName") == "my-variable-name"
    assert to_kebab_case("my_variableName") == "my_variable-name"
    assert to_kebab_case("already-kebab") == "already-kebab"
    # the other converters treat the same delimiters as word boundaries
    assert to_camel_case("my_variableName") == "myVariablename"


@pytest.mark.parametrize("func", [to_camel_case, to_dot_case, to_kebab_case])
@pytest.mark.parametrize("content", NON_STRINGS)
def test_non_string_input(func, content):
    with pytest.raises(InvalidArgumentError, match="Input must be a string"):
        func(content)


def test_invalid_argument_is_type_error():
    with pytest.raises(TypeError):
        to_dot_case(42)


SAMPLES = [
    "hello world",
    "  Mixed_case-Input here ",
    "UPPER_SNAKE_CASE",
    "x",
    "a1 b2-c3_d4",
    "--lead and trail__",
]


@pytest.mark.parametrize("content", SAMPLES)
def test_camel_case_shape(content):
    result = to_camel_case(content)
    assert not any(ch in result for ch in " -_")
    assert result[:1] == result[:1].lower()


@pytest.mark.parametrize("content", SAMPLES)
def test_dot_case_shape(content):
    result = to_dot_case(content)
    assert result == result.lower()
    assert not result.startswith(".")
    assert not result.endswith(".")
    assert ".." not in result
    assert all(ch.isalnum() or ch == "." for ch in result)
    assert to_dot_case(result) == result


def test_str_subclass_accepted():
    class Name(str):
        pass

    assert to_kebab_case(Name("myVariableName")) == "my-variable-name"
    assert to_dot_case(Name("Hello World")) == "hello.world"
