"""Tests for JSON, flat table and per-horse exports."""

import csv
import io
import json

import pytest
from openpyxl import load_workbook

from racecard.export import (
    RACE_COLUMNS,
    all_races_rows,
    build_workbook,
    competitor_rows,
    find_race,
    race_rows,
    to_json,
    to_table_rows,
    write_csv,
    write_xlsx,
)


def _result():
    return {
        "source_type": "V86",
        "races": [
            {
                "race_id": "r1",
                "source_type": "V86",
                "metadata": {
                    "title": "V86-1",
                    "track": "Jägersro",
                    "distance": "1640 m",
                    "discipline": "Trav",
                    "start_method": "Autostart",
                    "description": "Breddlopp",
                },
                "competitors": [
                    {
                        "start_number": "1",
                        "name": "Önskad Lycka",
                        "driver": "Carl Johan Jepson",
                        "odds": "4,50",
                        "history": [
                            {"date": "2025-08-01", "track": "Åby", "placement": "1"},
                            {"date": "2025-07-10", "track": "Jägersro", "placement": "4"},
                        ],
                    },
                    {"start_number": "2", "name": "Bara Bra", "driver": "Per Nordström", "lifeStats": "8 1-1-0"},
                ],
            },
            {
                "race_id": "r2",
                "source_type": "V86",
                "metadata": {"track": "Solvalla"},
                "competitors": [{"start_number": "1", "name": "Tredje"}],
            },
        ],
        "total_competitor_count": 3,
        "extracted_at": "2026-10-19T12:00:00.000Z",
    }


class TestToJson:

    def test_keeps_non_ascii(self):
        text = to_json(_result())
        assert "Önskad Lycka" in text
        assert json.loads(text)["total_competitor_count"] == 3


class TestTableRows:

    def test_header_row(self):
        header = to_table_rows(_result())[0]
        assert header[:len(RACE_COLUMNS)] == RACE_COLUMNS
        assert header[len(RACE_COLUMNS):] == ["start_number", "name", "driver", "odds", "lifeStats"]

    def test_one_row_per_competitor(self):
        rows = to_table_rows(_result())
        assert len(rows) == 4
        assert rows[1][:7] == ["V86", "r1", "V86-1", "Jägersro", "1640 m", "Trav", "Autostart"]
        assert rows[2][-1] == "8 1-1-0"
        assert rows[2][-2] == ""
        assert rows[3][:4] == ["V86", "r2", "", "Solvalla"]

    def test_history_left_out(self):
        assert "history" not in to_table_rows(_result())[0]

    def test_sample_page(self, sample_doc):
        from racecard.extraction import extract_race_data

        rows = to_table_rows(extract_race_data(sample_doc))
        assert len(rows) == 4
        assert "breeder" in rows[0]


class TestWriteCsv:

    def test_to_file_object(self):
        buffer = io.StringIO()
        assert write_csv(_result(), buffer) == 3
        parsed = list(csv.reader(io.StringIO(buffer.getvalue())))
        assert parsed[1][1] == "r1"

    def test_to_path_with_tabs(self, tmp_path):
        target = tmp_path / "races.tsv"
        write_csv(_result(), target, delimiter="\t")
        lines = target.read_text(encoding="utf-8").splitlines()
        assert lines[0].split("\t")[0] == "Source Type"
        assert len(lines) == 4


class TestCompetitorRows:

    def test_fields_then_race_info(self):
        rows = competitor_rows(_result()["races"][0], 1)
        assert rows[:4] == [
            ["start_number", "1"],
            ["name", "Önskad Lycka"],
            ["driver", "Carl Johan Jepson"],
            ["odds", "4,50"],
        ]
        assert ["raceTitle", "V86-1"] in rows
        assert ["raceDescription", "Breddlopp"] in rows

    def test_history_numbered_latest_highest(self):
        rows = competitor_rows(_result()["races"][0], "1")
        assert ["Date-2", "2025-08-01"] in rows
        assert ["Date-1", "2025-07-10"] in rows
        assert ["Track-2", "Åby"] in rows
        assert ["Comment-1", ""] in rows

    def test_history_capped(self):
        rows = competitor_rows(_result()["races"][0], "1", max_history=1)
        assert ["Date-1", "2025-08-01"] in rows
        assert not any(label == "Date-2" for label, _ in rows)

    def test_without_race_info_or_history(self):
        rows = competitor_rows(_result()["races"][0], "2", include_race_info=False)
        assert rows == [
            ["start_number", "2"],
            ["name", "Bara Bra"],
            ["driver", "Per Nordström"],
            ["lifeStats", "8 1-1-0"],
        ]

    def test_missing_horse(self):
        with pytest.raises(KeyError):
            competitor_rows(_result()["races"][1], "9")


class TestRaceRows:

    def test_race_info_once_then_horses(self):
        rows = race_rows(_result()["races"][0])
        assert rows[:3] == [["--- RACE INFO ---", ""], ["raceId", "r1"], ["raceTitle", "V86-1"]]
        assert rows.count(["--- RACE INFO ---", ""]) == 1
        assert ["start_number", "1"] in rows
        assert ["start_number", "2"] in rows

    def test_separator_between_horses_only(self):
        rows = race_rows(_result()["races"][0])
        separators = [i for i, row in enumerate(rows) if row[0].startswith("----------")]
        # one after the race info, one between the two horses
        assert len(separators) == 2
        assert rows[-1] == ["lifeStats", "8 1-1-0"]

    def test_horse_history_included(self):
        rows = race_rows(_result()["races"][0])
        assert ["Date-2", "2025-08-01"] in rows


class TestAllRacesRows:

    def test_banner_per_race(self):
        rows = all_races_rows(_result())
        banners = [row[0] for row in rows if row[0].startswith("-------- ")]
        assert banners == [
            "-------- V86-1 - Jägersro --------",
            "-------- r2 - Solvalla --------",
        ]

    def test_unknown_track(self):
        result = _result()
        result["races"][1]["metadata"] = {}
        assert ["-------- r2 - Unknown --------", ""] in all_races_rows(result)

    def test_find_race(self):
        assert find_race(_result(), "r2")["competitors"][0]["name"] == "Tredje"
        with pytest.raises(KeyError):
            find_race(_result(), "r9")


class TestWorkbook:

    def test_table_sheet_is_text_with_fitted_widths(self):
        wb = build_workbook(to_table_rows(_result()), "Race Data")
        ws = wb.active
        assert ws.title == "Race Data"
        assert ws["A1"].value == "Source Type"
        assert ws["A2"].number_format == "@"
        assert ws["H2"].number_format == "@"
        # "Source Type" is 11 wide, plus padding
        assert ws.column_dimensions["A"].width == 12
        # short values still get the minimum
        assert ws.column_dimensions["H"].width == 13

    def test_width_capped(self):
        ws = build_workbook([["x" * 80]], "Race Data").active
        assert ws.column_dimensions["A"].width == 30

    def test_vertical_sheet(self):
        rows = competitor_rows(_result()["races"][0], "1")
        ws = build_workbook(rows, "Horse Data", vertical=True).active
        assert ws["A1"].value == "start_number"
        assert ws["B4"].value == "4,50"
        assert ws["B4"].number_format == "@"
        assert ws.column_dimensions["A"].width == 25
        assert ws.column_dimensions["B"].width == 50

    def test_write_and_reload(self, tmp_path):
        target = tmp_path / "all.xlsx"
        write_xlsx(all_races_rows(_result()), target, "All Races", vertical=True)
        ws = load_workbook(target).active
        assert ws.title == "All Races"
        assert ws["A1"].value == "-------- V86-1 - Jägersro --------"
        assert ws["B3"].value == "r1"
