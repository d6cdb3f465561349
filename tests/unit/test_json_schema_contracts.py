"""
Tests for JSON Schema Contract Validators

Комплексное тестирование JSON Schema валидаторов:
- Валидность самих схем
- Валидация правильных данных
- Детекция нарушений required полей
- Детекция нарушений constraints (pattern/enum/const)
- Интеграция с Pydantic моделями
"""

import json

import pytest
from jsonschema import ValidationError

from src.bignum.contracts import (
    BigNumValueValidator,
    OperationResultValidator,
    SchemaLoader,
    validate_bignum_value,
    validate_operation_result,
)
from src.bignum.domain import BigNum


# =============================================================================
# FIXTURES - VALID DATA SAMPLES
# =============================================================================


@pytest.fixture
def valid_operation_result():
    """Валидная запись результата операции."""
    return {
        "schema_version": "1",
        "operation": "multiply",
        "operands": ["25", "100"],
        "result": "2500",
    }


@pytest.fixture
def valid_scientific_result():
    """Валидная запись научной нотации."""
    return {
        "schema_version": "1",
        "operation": "scientific",
        "operands": ["12345"],
        "result": "1.23E4",
        "significant_figures": 3,
    }


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class TestSchemaLoader:
    """Тесты загрузчика схем"""

    def test_loads_all_schemas(self) -> None:
        """Все схемы загружаются и проходят meta-validation"""
        loader = SchemaLoader()
        for name in ("bignum_value", "operation_result"):
            schema = loader.load_schema(name)
            assert schema["$schema"].endswith("2020-12/schema")

    def test_cache(self) -> None:
        """Повторная загрузка возвращает тот же объект"""
        loader = SchemaLoader()
        assert loader.load_schema("bignum_value") is loader.load_schema("bignum_value")

    def test_missing_schema(self) -> None:
        """Отсутствующая схема → FileNotFoundError"""
        with pytest.raises(FileNotFoundError):
            SchemaLoader().load_schema("does_not_exist")

    def test_missing_directory(self, tmp_path) -> None:
        """Отсутствующий каталог → RuntimeError"""
        with pytest.raises(RuntimeError, match="Schema directory not found"):
            SchemaLoader(tmp_path / "nowhere")

    def test_invalid_schema(self, tmp_path) -> None:
        """Невалидная JSON Schema → ValueError"""
        (tmp_path / "broken.json").write_text(
            json.dumps({"type": "no-such-type"}), encoding="utf-8"
        )
        with pytest.raises(ValueError, match="Invalid JSON Schema"):
            SchemaLoader(tmp_path).load_schema("broken")


# =============================================================================
# BIGNUM VALUE CONTRACT
# =============================================================================


class TestBigNumValueContract:
    """Тесты контракта bignum_value"""

    def test_model_dump_valid(self) -> None:
        """Сериализованная модель соответствует контракту"""
        for text in ("0", "7", "3628800"):
            validate_bignum_value(BigNum.parse(text).model_dump())

    def test_leading_zero_rejected(self) -> None:
        """Ведущий ноль нарушает контракт"""
        with pytest.raises(ValidationError):
            validate_bignum_value({"digits": "042"})

    def test_non_digit_rejected(self) -> None:
        """Не-цифры нарушают контракт"""
        validator = BigNumValueValidator()
        assert not validator.is_valid({"digits": "-1"})
        assert not validator.is_valid({"digits": ""})
        assert not validator.is_valid({"digits": 42})

    def test_required_and_extra_fields(self) -> None:
        """digits обязателен, лишние поля запрещены"""
        validator = BigNumValueValidator()
        assert not validator.is_valid({})
        assert not validator.is_valid({"digits": "1", "sign": "-"})


# =============================================================================
# OPERATION RESULT CONTRACT
# =============================================================================


class TestOperationResultContract:
    """Тесты контракта operation_result"""

    def test_valid(self, valid_operation_result, valid_scientific_result) -> None:
        """Валидные записи проходят"""
        validate_operation_result(valid_operation_result)
        validate_operation_result(valid_scientific_result)

    def test_compare_result(self, valid_operation_result) -> None:
        """Результат сравнения задаётся именем Ordering"""
        data = dict(valid_operation_result, operation="compare", result="LESS")
        validate_operation_result(data)

    def test_unknown_operation(self, valid_operation_result) -> None:
        """Неизвестная операция отвергается"""
        data = dict(valid_operation_result, operation="divide")
        with pytest.raises(ValidationError):
            validate_operation_result(data)

    def test_schema_version(self, valid_operation_result) -> None:
        """Неизвестная версия схемы отвергается"""
        data = dict(valid_operation_result, schema_version="2")
        with pytest.raises(ValidationError):
            validate_operation_result(data)

    def test_scientific_requires_significant_figures(self, valid_scientific_result) -> None:
        """scientific без significant_figures нарушает контракт"""
        data = dict(valid_scientific_result)
        del data["significant_figures"]
        with pytest.raises(ValidationError):
            validate_operation_result(data)

    def test_significant_figures_only_for_scientific(self, valid_operation_result) -> None:
        """significant_figures запрещён для остальных операций"""
        data = dict(valid_operation_result, significant_figures=3)
        with pytest.raises(ValidationError):
            validate_operation_result(data)

    def test_operand_count(self, valid_operation_result) -> None:
        """От одного до двух операндов"""
        validator = OperationResultValidator()
        assert not validator.is_valid(dict(valid_operation_result, operands=[]))
        assert not validator.is_valid(
            dict(valid_operation_result, operands=["1", "2", "3"])
        )

    def test_iter_errors(self, valid_operation_result) -> None:
        """iter_errors перечисляет все нарушения"""
        data = dict(valid_operation_result, operands=["01"], result="abc")
        errors = list(OperationResultValidator().iter_errors(data))
        assert len(errors) >= 2
