import json
from decimal import Decimal

from messaging.producer.serializers import build_payload, encode_key, serialize_entity


class TestBuildPayload:

    def test_exact_keys(self):
        payload = json.loads(build_payload("body text", {"source": "inventory-service"}))
        assert payload == {"body": "body text", "headers": {"source": "inventory-service"}}

    def test_utf8_body(self):
        raw = build_payload("재고 입고")
        assert isinstance(raw, bytes)
        assert json.loads(raw.decode("utf-8"))["body"] == "재고 입고"

    def test_headers_are_copied(self):
        headers = {"a": "1"}
        build_payload("x", headers)
        assert headers == {"a": "1"}


class TestEncodeKey:

    def test_int_and_str_ids_match(self):
        assert encode_key(15) == encode_key("15") == b"15"

    def test_bytes_pass_through(self):
        assert encode_key(b"\x00\x01") == b"\x00\x01"

    def test_none_means_no_key(self):
        assert encode_key(None) is None


class TestSerializeEntity:

    def test_datetimes_as_iso(self, inventory):
        body = json.loads(serialize_entity(inventory))
        assert body == {
            "id": 7,
            "sku": "SKU-007",
            "name": "Standing desk",
            "quantity": 12,
            "warehouse": "ICN-1",
            "created_at": "2024-05-01T09:30:00",
            "updated_at": "2024-05-02T18:00:00",
        }

    def test_decimal_as_string(self):
        class Priced:
            def to_dict(self):
                return {"price": Decimal("9.90")}

        assert json.loads(serialize_entity(Priced())) == {"price": "9.90"}
