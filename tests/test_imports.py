"""Verify that main modules are importable."""


def test_import_elastics() -> None:
    import elastics
    assert elastics.__version__ == "0.1.0"


def test_import_core() -> None:
    from elastics.core import ElasticSystem, ElasticExtentProperties, ElasticProperties, ElasticHistory
    assert ElasticSystem is not None
    assert ElasticExtentProperties is not None
    assert ElasticProperties is not None
    assert ElasticHistory is not None


def test_import_physics() -> None:
    from elastics.physics import (
        LinearElasticSystem,
        QuaternionElasticSystem,
        Vector2ElasticSystem,
        Vector3ElasticSystem,
        VectorSpace,
        QuaternionSpace,
    )
    assert LinearElasticSystem is not None
    assert Vector2ElasticSystem is not None
    assert Vector3ElasticSystem is not None
    assert QuaternionElasticSystem is not None
    assert VectorSpace(2).dim == 2
    assert QuaternionSpace().dim == 4


def test_import_simulation() -> None:
    from elastics.simulation import simulate
    assert callable(simulate)


def test_configuration_error_is_value_error() -> None:
    from elastics import ConfigurationError
    assert issubclass(ConfigurationError, ValueError)
