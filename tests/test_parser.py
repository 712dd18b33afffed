from bus_timetable.data.parser import parse_csv


def test_short_rows_are_padded():
    sheet = parse_csv("A,B\n1,2\n3")
    assert sheet.headers == ["A", "B"]
    assert sheet.records == [{"A": "1", "B": "2"}, {"A": "3", "B": ""}]


def test_headers_and_values_are_trimmed():
    sheet = parse_csv(" Time , Bus \n 7:00 AM ,  Red ")
    assert sheet.headers == ["Time", "Bus"]
    assert sheet.records == [{"Time": "7:00 AM", "Bus": "Red"}]


def test_crlf_line_endings():
    sheet = parse_csv("Time,Bus\r\n7:00 AM,Red\r\n5:00 PM,Blue")
    assert sheet.records == [
        {"Time": "7:00 AM", "Bus": "Red"},
        {"Time": "5:00 PM", "Bus": "Blue"},
    ]


def test_extra_fields_are_dropped():
    sheet = parse_csv("A,B\n1,2,3,4")
    assert sheet.records == [{"A": "1", "B": "2"}]


def test_record_keys_follow_header_order():
    sheet = parse_csv("Time,Bus,Route\n7:00 AM,Red,Kottawa")
    assert list(sheet.records[0]) == ["Time", "Bus", "Route"]


def test_quoted_commas_are_not_special():
    sheet = parse_csv('Route,Bus\n"Colombo, Fort",Red')
    assert sheet.records == [{"Route": '"Colombo', "Bus": 'Fort"'}]


def test_empty_text_has_no_records():
    sheet = parse_csv("")
    assert sheet.headers == [""]
    assert sheet.records == []


def test_trailing_newline_yields_blank_record():
    sheet = parse_csv("A,B\n1,2\n")
    assert sheet.records[-1] == {"A": "", "B": ""}


def test_to_frame_keeps_header_columns():
    frame = parse_csv("A,B\n1,2\n3").to_frame()
    assert list(frame.columns) == ["A", "B"]
    assert frame.to_dict("records") == [{"A": "1", "B": "2"}, {"A": "3", "B": ""}]


def test_to_frame_without_records():
    frame = parse_csv("Time,Bus").to_frame()
    assert list(frame.columns) == ["Time", "Bus"]
    assert frame.empty


def test_duplicate_headers_keep_last_value():
    sheet = parse_csv("A,A\n1,2")
    assert sheet.records == [{"A": "2"}]
    assert list(sheet.to_frame().columns) == ["A"]


def test_leading_byte_order_mark_is_dropped():
    sheet = parse_csv("\ufeffTime,Bus\r\n7:00 AM,Red")
    assert sheet.headers == ["Time", "Bus"]
    assert sheet.records == [{"Time": "7:00 AM", "Bus": "Red"}]
