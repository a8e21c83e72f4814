from core.contracts import DatasetSchema, FieldSchema, FUNCTION_HANDLES, RObject


def _schema() -> DatasetSchema:
    return DatasetSchema(
        fields=(
            FieldSchema(name="amount", value_type="numeric"),
            FieldSchema(name="country", value_type="categorical", levels=("US", "FR")),
            FieldSchema(name="label", value_type="categorical", levels=("legit", "fraud")),
        ),
        target_index=2,
    )


def test_dataset_schema_exposes_target_and_predictive_fields():
    schema = _schema()

    assert schema.field_names == ["amount", "country", "label"]
    assert schema.target_field is not None
    assert schema.target_field.name == "label"
    assert [f.name for f in schema.predictive_fields] == ["amount", "country"]


def test_dataset_schema_without_target():
    schema = DatasetSchema(fields=(FieldSchema(name="amount", value_type="numeric"),))

    assert schema.target_field is None
    assert [f.name for f in schema.predictive_fields] == ["amount"]


def test_empty_schema_is_allowed():
    schema = DatasetSchema()

    assert schema.field_names == []
    assert schema.target_field is None
    assert schema.predictive_fields == []


def test_out_of_range_target_index_has_no_target_field():
    schema = DatasetSchema(fields=(FieldSchema(name="a", value_type="numeric"),), target_index=4)

    assert schema.target_field is None


def test_function_handles_are_fixed_names():
    assert [handle.value for handle in FUNCTION_HANDLES] == [
        "loadModel",
        "getClassDistribution",
        "classify",
    ]
    assert str(RObject.MODEL_VARIABLE) == "model"
