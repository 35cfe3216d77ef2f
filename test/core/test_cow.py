from framepyground.core import Cow, Indexer


def test_owned_is_modified_in_place():
    value = [1, 2]
    holder = Cow.owned(value)
    assert not holder.is_shared
    holder.to_mut().append(3)
    assert holder.value is value
    assert value == [1, 2, 3]


def test_share_flags_both_holders():
    holder = Cow.owned([1])
    view = holder.share()
    assert holder.is_shared
    assert view.is_shared
    assert view.value is holder.value


def test_view_mutation_does_not_leak():
    holder = Cow.owned([1, 2])
    view = holder.share()
    view.to_mut().append(3)
    assert holder.value == [1, 2]
    assert view.value == [1, 2, 3]
    assert not view.is_shared


def test_source_mutation_does_not_leak():
    holder = Cow.owned([1, 2])
    view = holder.share()
    holder.to_mut().append(3)
    assert holder.value == [1, 2, 3]
    assert view.value == [1, 2]


def test_copies_indexer_with_its_copy_method():
    holder = Cow.owned(Indexer(["a"]))
    view = holder.share()
    view.to_mut().push("b")
    assert holder.value.labels == ("a",)
    assert view.value.labels == ("a", "b")
    assert view.value.get_loc("b") == 1


def test_repr():
    holder = Cow.owned([1])
    assert repr(holder) == "Cow(owned, [1])"
    holder.share()
    assert repr(holder) == "Cow(shared, [1])"
