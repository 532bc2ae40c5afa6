"""Tests for roster CSV ingestion."""
from decimal import Decimal

import pytest

from orgaudit.domains.org.ingest import read_employees_csv
from orgaudit.domains.org.models import Employee
from orgaudit.errors import IngestionError

from tests.conftest import SAMPLE_CSV

HEADER = "id,firstName,lastName,salary,managerId\n"


def write_csv(tmp_path, content, name="employees.csv"):
    path = tmp_path / name
    path.write_text(content)
    return path


class TestReadEmployeesCsv:
    def test_reads_sample_roster(self, roster_csv, employees):
        assert read_employees_csv(roster_csv) == employees

    def test_root_and_report(self, tmp_path):
        path = write_csv(tmp_path, HEADER + "123,Joe,Doe,60000\n124,Martsin,Adamovich,45000,123\n")
        joe, martsin = read_employees_csv(path)

        assert joe == Employee(123, "Joe", "Doe", Decimal("60000"), None)
        assert martsin.manager_id == 123
        assert martsin.salary == Decimal("45000")

    def test_salary_keeps_exact_decimal(self, tmp_path):
        path = write_csv(tmp_path, HEADER + "1,Ann,Lee,1234.57\n")
        assert read_employees_csv(path)[0].salary == Decimal("1234.57")

    def test_empty_manager_column(self, tmp_path):
        path = write_csv(tmp_path, HEADER + "1,Ann,Lee,100,\n")
        assert read_employees_csv(path)[0].manager_id is None

    def test_header_only(self, tmp_path):
        assert read_employees_csv(write_csv(tmp_path, HEADER)) == []

    def test_zero_byte_file(self, tmp_path):
        assert read_employees_csv(write_csv(tmp_path, "")) == []

    def test_name_that_looks_like_null(self, tmp_path):
        path = write_csv(tmp_path, HEADER + "1,NA,None,100\n")
        employee = read_employees_csv(path)[0]
        assert (employee.first_name, employee.last_name) == ("NA", "None")

    def test_missing_file(self, tmp_path):
        with pytest.raises(IngestionError, match="not found"):
            read_employees_csv(tmp_path / "missing.csv")

    @pytest.mark.parametrize(
        "row",
        [
            "abc,Joe,Doe,100\n",
            "1,Joe,Doe,lots\n",
            "1,Joe,Doe,-100\n",
            "1,Joe,Doe,100,boss\n",
        ],
    )
    def test_malformed_rows(self, tmp_path, row):
        with pytest.raises(IngestionError, match="failed validation"):
            read_employees_csv(write_csv(tmp_path, HEADER + row))

    def test_duplicate_ids_are_kept(self, tmp_path):
        path = write_csv(tmp_path, HEADER + "1,Ann,Lee,100\n1,Ann,Lee,200\n")
        assert len(read_employees_csv(path)) == 2

    def test_header_wording_is_ignored(self, tmp_path, employees):
        path = write_csv(
            tmp_path,
            "Id,First Name,Last Name,Salary,Manager Id\n" + SAMPLE_CSV.split("\n", 1)[1],
        )
        assert read_employees_csv(path) == employees

    def test_header_without_manager_column(self, tmp_path):
        path = write_csv(tmp_path, "id,firstName,lastName,salary\n123,Joe,Doe,60000\n124,Ann,Lee,45000,123\n")
        joe, ann = read_employees_csv(path)
        assert joe.manager_id is None
        assert ann.manager_id == 123

    def test_windows_encoded_roster(self, tmp_path):
        path = tmp_path / "employees.csv"
        path.write_bytes((HEADER + "1,José,Müller,100\n").encode("cp1252"))
        employee = read_employees_csv(path)[0]
        assert (employee.first_name, employee.last_name) == ("José", "Müller")
