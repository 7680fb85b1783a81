import pytest

from swagger_doc.schema.base import Leaf, MapField, MapSchema, SequenceSchema, SetSchema


def _field(key, value, required=True, predicate=False):
    return MapField(key=key, value=value, required=required, predicate=predicate)


@pytest.fixture
def pet() -> MapSchema:
    """Pet model with an anonymous owner map nested two levels deep."""
    return MapSchema(
        name="Pet",
        description="A pet in the store",
        fields=[
            _field("id", Leaf(type="integer", format="int64")),
            _field("name", Leaf(type="string")),
            _field("tag", Leaf(type="string"), required=False),
            _field(
                "owner",
                MapSchema(fields=[
                    _field("name", Leaf(type="string")),
                    _field("address", MapSchema(fields=[_field("street", Leaf(type="string"))])),
                ]),
                required=False,
            ),
        ],
    )


@pytest.fixture
def pets(pet) -> SequenceSchema:
    return SequenceSchema(items=pet)


@pytest.fixture
def pet_set(pet) -> SetSchema:
    return SetSchema(items=pet)
