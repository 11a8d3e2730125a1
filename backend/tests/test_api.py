"""
Tests for the calculator HTTP API.

Validates:
1. Health check and CORS
2. Subnet reports and mask lookups, with 400s for bad input
3. Base conversion, single and all-at-once, and bit chunking
4. Resistor decode/encode/parse, including settings-driven defaults
"""

import pytest


class TestHealth:
    """Tests for /api/health."""

    def test_health(self, client):
        response = client.get("/api/health")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "service": "calc-engine-backend"}

    def test_localhost_origin_allowed(self, client):
        """Any localhost port is an allowed CORS origin."""
        response = client.get("/api/health", headers={"Origin": "http://localhost:5173"})
        assert response.headers["access-control-allow-origin"] == "http://localhost:5173"

    def test_foreign_origin_not_allowed(self, client):
        response = client.get("/api/health", headers={"Origin": "https://example.com"})
        assert "access-control-allow-origin" not in response.headers


class TestSubnetEndpoint:
    """Tests for POST /api/subnet."""

    def test_class_c_private(self, client):
        response = client.post("/api/subnet", json={"ip": "192.168.1.100", "prefix": 24})
        assert response.status_code == 200
        data = response.json()
        assert data["subnet_mask"] == "255.255.255.0"
        assert data["wildcard_mask"] == "0.0.0.255"
        assert data["network_address"] == "192.168.1.0"
        assert data["broadcast_address"] == "192.168.1.255"
        assert data["first_usable_host"] == "192.168.1.1"
        assert data["last_usable_host"] == "192.168.1.254"
        assert data["total_hosts"] == 256
        assert data["usable_hosts"] == 254
        assert data["binary_subnet_mask"] == "11111111.11111111.11111111.00000000"
        assert data["ip_class"] == "C"
        assert data["is_private"] is True

    def test_point_to_point(self, client):
        """/31 has two addresses and no usable host range."""
        response = client.post("/api/subnet", json={"ip": "10.0.0.0", "prefix": 31})
        assert response.status_code == 200
        data = response.json()
        assert data["total_hosts"] == 2
        assert data["usable_hosts"] == 0
        assert data["first_usable_host"] == "N/A"

    @pytest.mark.parametrize("ip", ["192.168.01.1", "256.1.1.1", "1.2.3", "not-an-ip"])
    def test_invalid_address(self, client, ip):
        response = client.post("/api/subnet", json={"ip": ip, "prefix": 24})
        assert response.status_code == 400
        assert "Invalid IPv4 address" in response.json()["detail"]

    def test_invalid_prefix(self, client):
        response = client.post("/api/subnet", json={"ip": "10.0.0.1", "prefix": 33})
        assert response.status_code == 400

    def test_missing_field(self, client):
        response = client.post("/api/subnet", json={"ip": "10.0.0.1"})
        assert response.status_code == 422


class TestMaskEndpoint:
    """Tests for GET /api/subnet/mask/{prefix}."""

    def test_slash_20(self, client):
        response = client.get("/api/subnet/mask/20")
        assert response.status_code == 200
        data = response.json()
        assert data["subnet_mask"] == "255.255.240.0"
        assert data["wildcard_mask"] == "0.0.15.255"
        assert data["binary_subnet_mask"] == "11111111.11111111.11110000.00000000"

    def test_endpoints_of_range(self, client):
        assert client.get("/api/subnet/mask/0").json()["wildcard_mask"] == "255.255.255.255"
        assert client.get("/api/subnet/mask/32").json()["wildcard_mask"] == "0.0.0.0"

    def test_out_of_range(self, client):
        assert client.get("/api/subnet/mask/33").status_code == 400


class TestConvertEndpoint:
    """Tests for POST /api/convert and /api/convert/format."""

    def test_all_bases(self, client):
        response = client.post("/api/convert", json={"value": "255", "from_base": "dec"})
        assert response.status_code == 200
        data = response.json()
        assert data["binary"] == "11111111"
        assert data["decimal"] == "255"
        assert data["hexadecimal"] == "FF"
        assert data["binary_grouped"] == "11111111"

    def test_binary_grouped_pads_to_bytes(self, client):
        response = client.post("/api/convert", json={"value": "1FF", "from_base": "hex"})
        assert response.json()["binary_grouped"] == "00000001 11111111"

    def test_single_target(self, client):
        response = client.post(
            "/api/convert", json={"value": "ff", "from_base": "hex", "to_base": "dec"}
        )
        assert response.status_code == 200
        assert response.json()["value"] == "255"

    def test_empty_input_passes_through(self, client):
        response = client.post("/api/convert", json={"value": "", "from_base": "bin"})
        assert response.status_code == 200
        data = response.json()
        assert data["binary"] == data["decimal"] == data["hexadecimal"] == ""

    def test_invalid_digits(self, client):
        response = client.post(
            "/api/convert", json={"value": "102", "from_base": "bin", "to_base": "hex"}
        )
        assert response.status_code == 400
        assert response.json()["detail"] == "Invalid binary number"

    def test_unknown_base(self, client):
        response = client.post("/api/convert", json={"value": "7", "from_base": "oct"})
        assert response.status_code == 422

    def test_format_chunks(self, client):
        response = client.post("/api/convert/format", json={"bits": "10101", "chunk_size": 4})
        assert response.status_code == 200
        assert response.json()["formatted"] == "0001 0101"

    def test_format_default_chunk(self, client):
        response = client.post("/api/convert/format", json={"bits": "101010"})
        assert response.json()["formatted"] == "00101010"

    def test_format_rejects_non_bits(self, client):
        response = client.post("/api/convert/format", json={"bits": "12"})
        assert response.status_code == 422


class TestResistorDecode:
    """Tests for POST /api/resistor/decode."""

    def test_four_band(self, client):
        """brown black red gold = 1 kΩ ±5%; band3 holds the multiplier."""
        response = client.post("/api/resistor/decode", json={
            "bands": {"band1": "brown", "band2": "black", "band3": "red", "multiplier": "gold"},
            "band_count": 4,
        })
        assert response.status_code == 200
        data = response.json()
        assert data["resistance"] == pytest.approx(1000)
        assert data["tolerance"] == pytest.approx(5)
        assert data["formatted"] == "1 kΩ"
        assert data["complete"] is True

    def test_six_band_tempco(self, client):
        response = client.post("/api/resistor/decode", json={
            "bands": {
                "band1": "red", "band2": "violet", "band3": "green",
                "multiplier": "orange", "tolerance": "brown", "temp_coefficient": "red",
            },
            "band_count": 6,
        })
        data = response.json()
        assert data["resistance"] == pytest.approx(275000)
        assert data["tolerance"] == pytest.approx(1)
        assert data["temp_coefficient"] == 50

    def test_incomplete_selection(self, client):
        """Missing bands are not an error; the resistance is just unknown."""
        response = client.post("/api/resistor/decode", json={
            "bands": {"band1": "brown"},
            "band_count": 5,
        })
        assert response.status_code == 200
        data = response.json()
        assert data["resistance"] is None
        assert data["formatted"] == "N/A"
        assert data["complete"] is False

    def test_unknown_color(self, client):
        response = client.post("/api/resistor/decode", json={
            "bands": {"band1": "pink"},
            "band_count": 4,
        })
        assert response.status_code == 422

    def test_unsupported_band_count(self, client):
        response = client.post("/api/resistor/decode", json={"bands": {}, "band_count": 3})
        assert response.status_code == 422


class TestResistorEncode:
    """Tests for POST /api/resistor/encode."""

    def test_four_band(self, client):
        response = client.post("/api/resistor/encode", json={
            "value": "4k7", "tolerance": 5, "band_counts": [4],
        })
        assert response.status_code == 200
        data = response.json()
        assert data["band_count"] == 4
        assert data["bands"]["band1"] == "yellow"
        assert data["bands"]["band2"] == "violet"
        assert data["bands"]["band3"] == "red"
        assert data["bands"]["multiplier"] == "gold"
        assert data["bands"]["tolerance"] is None
        assert data["resistance"] == pytest.approx(4700)
        assert data["formatted"] == "4.7 kΩ"

    def test_six_band_gets_tempco(self, client):
        response = client.post("/api/resistor/encode", json={
            "value": "4700", "tolerance": 1, "band_counts": [6],
        })
        bands = response.json()["bands"]
        assert bands["band3"] == "black"
        assert bands["multiplier"] == "brown"
        assert bands["tolerance"] == "brown"
        assert bands["temp_coefficient"] == "brown"

    def test_fractional_value(self, client):
        """1.5 Ω uses a gold (×0.1) multiplier."""
        response = client.post("/api/resistor/encode", json={"value": "1.5", "band_counts": [4]})
        data = response.json()
        assert data["bands"]["band3"] == "gold"
        assert data["resistance"] == pytest.approx(1.5)

    def test_default_band_counts_from_settings(self, client, configure):
        configure(default_band_counts=(5,))
        response = client.post("/api/resistor/encode", json={"value": "4700", "tolerance": 5})
        assert response.status_code == 200
        assert response.json()["band_count"] == 5

    def test_series_from_settings(self, client, configure):
        """5000 Ω snaps to E24 5.1 kΩ when E_SERIES is configured."""
        configure(e_series="E24")
        response = client.post("/api/resistor/encode", json={
            "value": "5000", "tolerance": 5, "band_counts": [4],
        })
        data = response.json()
        assert data["bands"]["band1"] == "green"
        assert data["bands"]["band2"] == "brown"
        assert data["resistance"] == pytest.approx(5100)

    def test_unparseable_value(self, client):
        response = client.post("/api/resistor/encode", json={"value": "abc"})
        assert response.status_code == 400

    def test_negative_value(self, client):
        response = client.post("/api/resistor/encode", json={"value": "-5"})
        assert response.status_code == 400

    def test_unsupported_tolerance(self, client):
        response = client.post("/api/resistor/encode", json={"value": "1k", "tolerance": 3})
        assert response.status_code == 422
        assert response.json()["detail"].startswith("No standard color band found for tolerance")

    def test_too_large(self, client):
        response = client.post("/api/resistor/encode", json={"value": "5e13"})
        assert response.status_code == 422

    def test_bad_series_name(self, client):
        response = client.post("/api/resistor/encode", json={"value": "1k", "series": "E7"})
        assert response.status_code == 422


class TestResistorParse:
    """Tests for POST /api/resistor/parse."""

    @pytest.mark.parametrize("text, ohms, formatted", [
        ("4k7", 4700, "4.7 kΩ"),
        ("220 ohms", 220, "220 Ω"),
        ("1M", 1e6, "1 MΩ"),
        ("1,500", 1500, "1.5 kΩ"),
    ])
    def test_parses(self, client, text, ohms, formatted):
        response = client.post("/api/resistor/parse", json={"value": text})
        assert response.status_code == 200
        data = response.json()
        assert data["ohms"] == pytest.approx(ohms)
        assert data["formatted"] == formatted

    @pytest.mark.parametrize("text", ["R33", "abc", "", "1e400"])
    def test_rejects(self, client, text):
        response = client.post("/api/resistor/parse", json={"value": text})
        assert response.status_code == 400


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
