import pickle
import pytest
from dictkit import Dictionary
from dictkit.core.errors import DictkitError, EmptyMappingError


def test_empty_mapping_error_hierarchy():
    err = EmptyMappingError(dict)

    assert isinstance(err, DictkitError)
    assert isinstance(err, KeyError)
    assert err.mapping_type is dict


def test_empty_mapping_error_message_not_quoted():
    # KeyError would otherwise render the message with repr()
    assert str(EmptyMappingError(dict)) == "shift() called on an empty dict"


def test_caught_as_key_error():
    with pytest.raises(KeyError):
        raise EmptyMappingError(dict)


def test_survives_pickling():
    for mapping_type in (dict, Dictionary):
        restored = pickle.loads(pickle.dumps(EmptyMappingError(mapping_type)))

        assert type(restored) is EmptyMappingError
        assert restored.mapping_type is mapping_type
        assert str(restored) == f"shift() called on an empty {mapping_type.__name__}"
