import pytest
import requests

from app.cli import main
from app.infra.providers.fixer import FixerClient

from conftest import StubSession


def test_convert_prints_result(fixer_client, capsys):
    code = main(["convert", "usd", "gbp", "100"], client=fixer_client)

    out = capsys.readouterr().out
    assert code == 0
    assert "100 USD = 77.27 GBP" in out
    assert "Exchange rate: 1 USD = 0.772727 GBP" in out
    assert "Date: 2024-06-10" in out


def test_convert_from_base(fixer_client, capsys):
    main(["convert", "EUR", "USD", "50"], client=fixer_client)

    out = capsys.readouterr().out
    assert "50 EUR = 55.00 USD" in out
    assert "1 EUR = 1.100000 USD" in out


def test_convert_unsupported_currency(fixer_client, capsys):
    code = main(["convert", "XYZ", "USD", "100"], client=fixer_client)

    err = capsys.readouterr().err
    assert code == 1
    assert "Currency not supported: XYZ" in err


def test_convert_upstream_failure(capsys):
    client = FixerClient(access_key="k", session=StubSession(exc=requests.Timeout("timed out")))

    code = main(["convert", "USD", "GBP", "1"], client=client)

    assert code == 1
    assert capsys.readouterr().err.startswith("Error: Failed to fetch exchange rates")


def test_convert_rejects_non_numeric_amount(fixer_client):
    with pytest.raises(SystemExit) as excinfo:
        main(["convert", "USD", "GBP", "lots"], client=fixer_client)

    assert excinfo.value.code == 2


def test_rates_prints_payload_and_symbols(fixer_client, capsys):
    code = main(["rates", "--symbols", "usd,GBP,XYZ"], client=fixer_client)

    out = capsys.readouterr().out
    assert code == 0
    assert '"base": "EUR"' in out
    assert "Exchange rates against 1 EUR:" in out
    assert "USD: 1.1" in out
    assert "GBP: 0.85" in out
    assert "XYZ: n/a" in out


def test_convert_echoes_large_amount_without_exponent(fixer_client, capsys):
    main(["convert", "USD", "GBP", "1234567.89"], client=fixer_client)

    out = capsys.readouterr().out
    assert "1234567.89 USD = " in out
    assert "e+06" not in out
