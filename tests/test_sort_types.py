import pytest

from fastsort.sort import Direction, InvalidSortError, Order, Sort


class TestDirection:
    @pytest.mark.parametrize(
        "value, expected",
        [
            ("asc", Direction.ASC),
            ("ASC", Direction.ASC),
            ("Ascending", Direction.ASC),
            ("desc", Direction.DESC),
            (" DESC ", Direction.DESC),
            ("descending", Direction.DESC),
        ],
    )
    def test_from_string(self, value, expected):
        assert Direction.from_string(value) is expected

    def test_from_string_rejects_unknown_direction(self):
        with pytest.raises(InvalidSortError):
            Direction.from_string("sideways")

    def test_from_optional_string(self):
        assert Direction.from_optional_string("sideways") is None
        assert Direction.from_optional_string(None) is None
        assert Direction.from_optional_string("") is None

    def test_is_ascending(self):
        assert Direction.ASC.is_ascending
        assert not Direction.ASC.is_descending
        assert Direction.DESC.is_descending


class TestOrder:
    def test_default_direction_is_ascending(self):
        order = Order("name")

        assert order.direction is Direction.ASC
        assert order.is_ascending

    def test_direction_given_as_string(self):
        assert Order("name", "DESC").direction is Direction.DESC

    @pytest.mark.parametrize("prop", ["", "   ", ".", " .. ", None])
    def test_blank_property_is_rejected(self, prop):
        with pytest.raises(InvalidSortError):
            Order(prop)

    def test_property_is_trimmed(self):
        assert Order("  name ").property == "name"
        assert Order(" name", Direction.DESC) == Order("name", Direction.DESC)

    def test_reverse(self):
        assert Order("name").reverse() == Order("name", Direction.DESC)
        assert Order("name", Direction.DESC).reverse() == Order("name")

    def test_is_immutable(self):
        order = Order("name")

        with pytest.raises(AttributeError):
            order.property = "other"


class TestSort:
    def test_unsorted(self):
        sort = Sort.unsorted()

        assert sort.is_unsorted
        assert not sort.is_sorted
        assert not sort
        assert len(sort) == 0
        assert sort == Sort()

    def test_by_properties(self):
        sort = Sort.by("lastname", "firstname", direction=Direction.DESC)

        assert list(sort) == [
            Order("lastname", Direction.DESC),
            Order("firstname", Direction.DESC),
        ]
        assert sort.is_sorted

    def test_equality_depends_on_order(self):
        assert Sort.by("a", "b") == Sort.by("a", "b")
        assert Sort.by("a", "b") != Sort.by("b", "a")

    def test_and_concatenates(self):
        sort = Sort.by("bar", "foo").and_(Sort.by("fizz", "buzz"))

        assert [order.property for order in sort] == ["bar", "foo", "fizz", "buzz"]
        assert sort == Sort.by("bar", "foo") + Sort.by("fizz", "buzz")

    def test_and_does_not_modify_operands(self):
        first = Sort.by("a")
        first.and_(Sort.by("b"))

        assert first == Sort.by("a")

    def test_orders_list_is_stored_as_tuple(self):
        sort = Sort([Order("a")])

        assert sort.orders == (Order("a"),)
        assert hash(sort) == hash(Sort.by("a"))

    def test_get_order_for(self):
        sort = Sort.by_orders(Order("a"), Order("b", Direction.DESC))

        assert sort.get_order_for("b") == Order("b", Direction.DESC)
        assert sort.get_order_for("c") is None

    def test_ascending_and_descending(self):
        sort = Sort.by_orders(Order("a"), Order("b", Direction.DESC))

        assert sort.descending() == Sort.by("a", "b", direction=Direction.DESC)
        assert sort.ascending() == Sort.by("a", "b")
