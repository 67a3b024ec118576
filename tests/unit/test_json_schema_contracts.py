"""
Tests for JSON Schema Contract Validators

Комплексное тестирование JSON Schema валидаторов:
- Валидность самих схем
- Валидация правильных данных
- Детекция нарушений required полей
- Детекция нарушений типов
- Детекция нарушений constraints (enum/pattern/minLength)
- Интеграция с Pydantic моделями
"""

from pathlib import Path

import pytest
from jsonschema import ValidationError

from src.core.contracts import validators as validators_module
from src.core.contracts import (
    ArithmeticRequestValidator,
    ArithmeticResultValidator,
    SchemaLoader,
    validate_arithmetic_request,
    validate_arithmetic_result,
)
from src.core.domain import ArithmeticRequest, Operation


# =============================================================================
# FIXTURES - VALID DATA SAMPLES
# =============================================================================


@pytest.fixture
def valid_arithmetic_request():
    """Валидный arithmetic_request для тестирования."""
    return {
        "schema_version": "1",
        "operation": "add",
        "left": "4294967295",
        "right": "8234567891",
    }


@pytest.fixture
def valid_arithmetic_result():
    """Валидный arithmetic_result для тестирования."""
    return {
        "schema_version": "1",
        "operation": "add",
        "left": "4294967295",
        "right": "8234567891",
        "result": "12529535186",
    }


# =============================================================================
# TESTS - SCHEMA LOADING
# =============================================================================


def test_schema_loader_loads_all_schemas():
    """Проверка загрузки всех схем."""
    loader = SchemaLoader()

    request_schema = loader.load_schema("arithmetic_request")
    result_schema = loader.load_schema("arithmetic_result")

    # Проверка версий схем
    assert request_schema["properties"]["schema_version"]["const"] == "1"
    assert result_schema["properties"]["schema_version"]["const"] == "1"


def test_schema_operations_match_domain_enum():
    """Перечень операций в схемах совпадает с Operation."""
    loader = SchemaLoader()
    expected = [op.value for op in Operation]

    for name in ("arithmetic_request", "arithmetic_result"):
        schema = loader.load_schema(name)
        assert schema["properties"]["operation"]["enum"] == expected


def test_schema_loader_caches_schemas():
    """Проверка кэширования схем."""
    loader = SchemaLoader()

    schema1 = loader.load_schema("arithmetic_request")
    schema2 = loader.load_schema("arithmetic_request")

    # Должен вернуть тот же объект (кэш)
    assert schema1 is schema2


def test_schema_loader_raises_on_missing_schema():
    """Проверка ошибки при отсутствующей схеме."""
    loader = SchemaLoader()

    with pytest.raises(FileNotFoundError):
        loader.load_schema("non_existent_schema")


def test_schemas_ship_inside_package():
    """Схемы лежат внутри пакета src.core.contracts и попадают в установку."""
    schema_dir = Path(validators_module.__file__).parent / "schema"

    assert (schema_dir / "arithmetic_request.json").is_file()
    assert (schema_dir / "arithmetic_result.json").is_file()
    assert SchemaLoader()._schema_dir == schema_dir


# =============================================================================
# TESTS - ARITHMETIC REQUEST VALIDATION
# =============================================================================


def test_request_validator_accepts_valid_data(valid_arithmetic_request):
    """Валидация правильного arithmetic_request."""
    validator = ArithmeticRequestValidator()
    validator.validate(valid_arithmetic_request)  # Не должно выбросить исключение
    assert validator.is_valid(valid_arithmetic_request)


def test_request_validate_function(valid_arithmetic_request):
    """Проверка функции validate_arithmetic_request."""
    validate_arithmetic_request(valid_arithmetic_request)


def test_request_accepts_leading_zeros(valid_arithmetic_request):
    """Ведущие нули допустимы (парсер их сохраняет)."""
    data = valid_arithmetic_request.copy()
    data["left"] = "007"
    validate_arithmetic_request(data)


def test_request_rejects_missing_required_field(valid_arithmetic_request):
    """Валидация отклоняет данные без обязательных полей."""
    validator = ArithmeticRequestValidator()

    data = valid_arithmetic_request.copy()
    del data["right"]

    with pytest.raises(ValidationError) as exc_info:
        validator.validate(data)
    assert "'right' is a required property" in str(exc_info.value)


def test_request_rejects_wrong_type(valid_arithmetic_request):
    """Операнд должен быть строкой, а не числом."""
    data = valid_arithmetic_request.copy()
    data["left"] = 42

    with pytest.raises(ValidationError) as exc_info:
        validate_arithmetic_request(data)
    assert "is not of type 'string'" in str(exc_info.value)


def test_request_rejects_empty_operand(valid_arithmetic_request):
    data = valid_arithmetic_request.copy()
    data["left"] = ""

    with pytest.raises(ValidationError):
        validate_arithmetic_request(data)


def test_request_rejects_non_digit_operand(valid_arithmetic_request):
    """Знак, пробелы и разделители запрещены."""
    validator = ArithmeticRequestValidator()

    for bad in ("-1", "+1", " 1", "1 ", "1_000", "1.5", "12a"):
        data = valid_arithmetic_request.copy()
        data["right"] = bad
        assert not validator.is_valid(data)


def test_request_rejects_invalid_operation(valid_arithmetic_request):
    data = valid_arithmetic_request.copy()
    data["operation"] = "power"

    with pytest.raises(ValidationError):
        validate_arithmetic_request(data)


def test_request_rejects_wrong_schema_version(valid_arithmetic_request):
    data = valid_arithmetic_request.copy()
    data["schema_version"] = "2"

    with pytest.raises(ValidationError):
        validate_arithmetic_request(data)


def test_request_rejects_additional_properties(valid_arithmetic_request):
    data = valid_arithmetic_request.copy()
    data["strategy"] = "long_division"

    with pytest.raises(ValidationError):
        validate_arithmetic_request(data)


def test_request_iter_errors_reports_all(valid_arithmetic_request):
    """iter_errors возвращает все нарушения, а не только первое."""
    validator = ArithmeticRequestValidator()

    data = valid_arithmetic_request.copy()
    data["left"] = "x"
    data["right"] = ""
    data["operation"] = "power"

    errors = list(validator.iter_errors(data))
    assert len(errors) >= 3


# =============================================================================
# TESTS - ARITHMETIC RESULT VALIDATION
# =============================================================================


def test_result_validator_accepts_valid_data(valid_arithmetic_result):
    validator = ArithmeticResultValidator()
    validator.validate(valid_arithmetic_result)
    assert validator.is_valid(valid_arithmetic_result)


def test_result_validate_function(valid_arithmetic_result):
    validate_arithmetic_result(valid_arithmetic_result)


def test_result_rejects_missing_result(valid_arithmetic_result):
    data = valid_arithmetic_result.copy()
    del data["result"]

    with pytest.raises(ValidationError) as exc_info:
        validate_arithmetic_result(data)
    assert "'result' is a required property" in str(exc_info.value)


# =============================================================================
# TESTS - PYDANTIC MODEL INTEGRATION
# =============================================================================


def test_request_model_generates_valid_json():
    """Проверка, что Pydantic ArithmeticRequest генерирует валидный JSON."""
    request = ArithmeticRequest(operation=Operation.DIVIDE, left="16", right="5")

    request_dict = request.model_dump(mode="json")
    # Добавляем schema_version (не часть Pydantic модели, но требуется в JSON Schema)
    request_dict["schema_version"] = "1"

    validate_arithmetic_request(request_dict)


def test_result_model_generates_valid_json():
    """Проверка, что результат evaluate() проходит схему arithmetic_result."""
    request = ArithmeticRequest(operation=Operation.SUBTRACT, left="1099511627776", right="1099511626000")

    result_dict = request.evaluate().model_dump(mode="json")
    result_dict["schema_version"] = "1"

    validate_arithmetic_result(result_dict)
    assert result_dict["result"] == "1776"
