from searchplan.data import AggregationResponseParser, DataType, ExprValueFactory


class CountParser:
    def parse(self, aggregations):
        return [{"count": aggregations["count"]["value"]}]


def test_extend_type_mapping_keeps_existing():
    factory = ExprValueFactory({"name": DataType.TEXT})
    factory.extend_type_mapping({"name": "keyword", "age": "integer"})
    assert factory.get_type("name") == DataType.TEXT
    assert factory.get_type("age") == DataType.INTEGER
    assert factory.get_type("missing") is None


def test_extend_type_mapping_keeps_unlisted_type():
    factory = ExprValueFactory()
    factory.extend_type_mapping({"shape": "geo_shape", "code": "wildcard"})
    assert factory.get_type("shape") == "geo_shape"
    assert factory.get_type("code") == "wildcard"


def test_set_parser_replaces():
    factory = ExprValueFactory()
    first = CountParser()
    second = CountParser()
    factory.set_parser(first)
    factory.set_parser(second)
    assert factory.parser is second
    assert isinstance(second, AggregationResponseParser)
    assert factory.parser.parse({"count": {"value": 3}}) == [{"count": 3}]
