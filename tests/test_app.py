"""
Tests for the terminal menu and configuration.

The menu is driven with scripted answers; running out of answers
behaves like the user pressing Ctrl-D.
"""

import logging
import pytest
from decimal import Decimal

from pydantic import ValidationError

from app.main import InvalidAmountError, main, parse_amount, run_menu
from budget_ledger import LedgerStore
from budget_ledger.audit import create_audit_logger
from budget_ledger.config import LedgerSettings, get_settings
from budget_ledger.services.storage import InMemoryTransactionStorage


def scripted(*answers):
    remaining = iter(answers)

    def read(prompt: str) -> str:
        try:
            return next(remaining)
        except StopIteration:
            raise EOFError
    return read


@pytest.fixture
def output():
    return []


@pytest.fixture
def ledger(ledger_path, clock):
    return LedgerStore.open(ledger_path, clock=clock)


class TestParseAmount:
    """Tests for user-typed amounts."""

    def test_plain_and_symbol(self):
        assert parse_amount("120.50") == Decimal("120.50")
        assert parse_amount(" $7 ") == Decimal("7")
        assert parse_amount("£3.10", "£") == Decimal("3.10")

    @pytest.mark.parametrize("text", ["", "abc", "-5", "nan", "Infinity"])
    def test_rejected(self, text):
        with pytest.raises(InvalidAmountError):
            parse_amount(text)


class TestMenu:
    """Tests for the menu loop."""

    def test_example_session(self, ledger, output):
        """Test adding income and expense then printing the report."""
        code = run_menu(
            ledger,
            scripted(
                "1", "500.00", "Salary", "July",
                "2", "120.50", "Food", "Groceries",
                "5",
                "6",
            ),
            output.append,
        )

        assert code == 0
        assert "--- Financial Report ---" in "\n".join(output)
        assert "Total Income: $500.00" in output
        assert "Total Expense: $120.50" in output
        assert "Net Balance: $379.50" in output
        assert output[-1] == "Exiting the application. Goodbye!"

    def test_multi_word_text_survives_restart(self, ledger, ledger_path, clock, output):
        """Test that whole-line prompts keep spaces through a reload."""
        run_menu(
            ledger,
            scripted("2", "42", "Eating Out", "lunch with client", "6"),
            output.append,
        )

        reopened = LedgerStore.open(ledger_path, clock=clock)
        tx = reopened.transactions[0]
        assert tx.category == "Eating Out"
        assert tx.description == "lunch with client"

    def test_invalid_choice(self, ledger, output):
        """Test that an unknown option is reported and the loop continues."""
        code = run_menu(ledger, scripted("9", "hello", "6"), output.append)
        assert code == 0
        assert output.count("Invalid choice. Please try again.") == 2

    def test_invalid_amount(self, ledger, output):
        """Test that a bad amount adds nothing and returns to the menu."""
        run_menu(ledger, scripted("1", "lots", "3", "6"), output.append)
        assert len(ledger) == 0
        assert "Invalid amount: 'lots' is not a valid amount." in output
        assert "No transactions recorded yet." in output

    def test_negative_amount(self, ledger, output):
        """Test that a negative amount is refused."""
        run_menu(ledger, scripted("2", "-3", "6"), output.append)
        assert len(ledger) == 0
        assert "Invalid amount: Amount cannot be negative." in output

    def test_list_all(self, ledger, output):
        """Test the list-all option."""
        run_menu(
            ledger,
            scripted("1", "10", "Gift", "Birthday", "3", "6"),
            output.append,
        )
        assert "--- All Transactions ---" in "\n".join(output)
        assert (
            "Date: 2024-07-01, Type: Income, Amount: $10.00, "
            "Category: Gift, Description: Birthday"
        ) in output

    def test_list_by_category(self, ledger, output):
        """Test the category option shows only exact matches."""
        run_menu(
            ledger,
            scripted(
                "2", "5", "Food", "Bread",
                "2", "6", "food", "Milk",
                "4", "Food",
                "4", "Rent",
                "6",
            ),
            output.append,
        )
        text = "\n".join(output)
        assert "Known categories: Food, food" in output
        assert "--- Transactions for Category: Food ---" in text
        assert sum("Description: Bread" in line for line in output) == 1
        assert not any("Description: Milk" in line for line in output)
        assert "No transactions in this category." in output

    def test_failed_save_is_reported(self, clock, output):
        """Test that a storage failure is shown and the menu keeps going."""
        ledger = LedgerStore(InMemoryTransactionStorage(fail_writes=True), clock=clock)
        code = run_menu(ledger, scripted("1", "10", "Gift", "Birthday", "6"), output.append)

        assert code == 0
        assert len(ledger) == 0
        assert any(line.startswith("Could not save transaction:") for line in output)

    def test_end_of_input_exits_cleanly(self, ledger, output):
        """Test that running out of input exits with status 0."""
        assert run_menu(ledger, scripted(), output.append) == 0
        assert output[-1] == "Exiting the application. Goodbye!"

    def test_end_of_input_mid_prompt(self, ledger, output):
        """Test Ctrl-D while entering a transaction adds nothing."""
        assert run_menu(ledger, scripted("1", "10"), output.append) == 0
        assert len(ledger) == 0


class TestSettings:
    """Tests for configuration loading."""

    def test_defaults(self):
        settings = LedgerSettings(_env_file=None)
        assert str(settings.data_file) == "transactions.txt"
        assert settings.currency_symbol == "$"
        assert settings.effective_log_level == logging.WARNING

    def test_environment_overrides(self, monkeypatch, tmp_path):
        monkeypatch.setenv("LEDGER_DATA_FILE", str(tmp_path / "book.txt"))
        monkeypatch.setenv("LEDGER_LOG_LEVEL", "info")
        settings = get_settings()
        assert settings.data_file == tmp_path / "book.txt"
        assert settings.log_level == "INFO"
        assert settings.effective_log_level == logging.INFO

    def test_debug_mode_wins(self):
        settings = LedgerSettings(_env_file=None, debug_mode=True, log_level="ERROR")
        assert settings.effective_log_level == logging.DEBUG

    def test_invalid_log_level(self):
        with pytest.raises(ValidationError):
            LedgerSettings(_env_file=None, log_level="LOUD")


class TestMain:
    """Tests for the application entry point."""

    def test_main_runs_and_exits(self, monkeypatch, tmp_path, restore_root_logger):
        """Test a full start-up with a log file and immediate exit."""
        settings = LedgerSettings(
            _env_file=None,
            data_file=tmp_path / "transactions.txt",
            log_file=tmp_path / "ledger.log",
            log_level="INFO",
        )
        monkeypatch.setattr("builtins.input", scripted("6"))

        assert main(settings) == 0
        assert (tmp_path / "ledger.log").exists()

    def test_main_reports_bad_configuration(self, monkeypatch, capsys):
        """Test that invalid configuration exits with status 1."""
        monkeypatch.setenv("LEDGER_LOG_LEVEL", "LOUD")
        assert main() == 1
        assert "Invalid configuration" in capsys.readouterr().err


class TestMenuWithAuditing:
    """Tests for the menu with the real audit logger attached."""

    @pytest.fixture
    def audited_ledger(self, ledger_path, clock):
        return LedgerStore.open(
            ledger_path, audit_logger=create_audit_logger(), clock=clock
        )

    def test_long_category_filter_keeps_menu_running(self, audited_ledger, output):
        """Test that a 600-character category filter does not end the session."""
        code = run_menu(audited_ledger, scripted("4", "x" * 600, "6"), output.append)
        assert code == 0
        assert "No transactions in this category." in output
        assert output[-1] == "Exiting the application. Goodbye!"

    def test_huge_amount_reported_as_recorded(self, audited_ledger, ledger_path, output):
        """Test that a saved 601-digit amount is confirmed, not rejected."""
        run_menu(
            audited_ledger,
            scripted("1", "1" + "0" * 600, "Lottery", "win", "6"),
            output.append,
        )
        assert "Income recorded." in output
        assert not any(line.startswith("Transaction rejected") for line in output)
        assert len(audited_ledger) == 1
        assert len(ledger_path.read_text(encoding="utf-8").splitlines()) == 1


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
