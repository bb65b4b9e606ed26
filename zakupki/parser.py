"""Parsing of procurement notice print forms into :class:`Tender` records."""

import re

from bs4 import BeautifulSoup, Tag

from .models import (
    ApplicationSecurityInfo,
    ContactInfo,
    ContractInfo,
    ElectronicPlatform,
    ExecutionInfo,
    ItemCharacteristic,
    ProcedureInfo,
    ProcurementItem,
    Tender,
)

__all__ = [
    "parse_tender",
    "parse_parameters",
    "parse_money",
    "normalize_whitespace",
    "parse_items_and_characteristics",
]

_TABLE_SELECTOR = "table.table.font14"
_CHARACTERISTICS_MARKER = "Характеристики товара"
_ITEMS_MARKER = "Наименование товара"
_NUMERIC_PREFIX = re.compile(r"[0-9.]*")


def normalize_whitespace(text):
    """Collapse runs of whitespace into single spaces and trim the ends."""
    return " ".join(text.split())


def parse_money(value):
    """Read the leading amount of a money string; 0.0 when there is none."""
    value = value.strip().replace("\u00a0", "").replace(" ", "").replace(",", ".")
    digits = _NUMERIC_PREFIX.match(value).group()
    try:
        return float(digits)
    except ValueError:
        return 0.0


def _text(tags):
    return "".join(tag.get_text() for tag in tags)


def _unique(tags):
    seen = set()
    for tag in tags:
        if id(tag) not in seen:
            seen.add(id(tag))
            yield tag


def _following_siblings(tag):
    return (sibling for sibling in tag.next_siblings if isinstance(sibling, Tag))


def _next_sibling(tag):
    return next(_following_siblings(tag), None)


def parse_parameters(soup):
    """Collect the named parameters of a print form into a dict."""
    params = {}
    for row in soup.find_all("tr"):
        name = _text(row.select("p.parameter")).strip()
        value = normalize_whitespace(_text(row.select("p.parameterValue")))
        if name:
            params[name] = value

        caption = _text(row.select("p.caption")).strip()
        if caption:
            following = _next_sibling(row)
            if following is not None:
                caption_value = normalize_whitespace(_text(following.select("p.parameter")))
                if caption_value:
                    params[caption] = caption_value

    params["title"] = normalize_whitespace(_text(soup.select("p.title")))
    params["subtitle"] = normalize_whitespace(_text(soup.select("p.subtitle")))
    return params


def _first_row_contains(table, marker):
    first_row = table.find("tr")
    return first_row is not None and marker in first_row.get_text()


def _column_index(header_rows):
    cells = _unique(th for row in header_rows for th in row.find_all("th"))
    plain = [th for th in cells if th.find("table") is None]
    return {normalize_whitespace(th.get_text()): position for position, th in enumerate(plain)}


def _body_rows(table):
    rows = table.find_all("tr")
    return list(_unique(sibling for row in rows for sibling in _following_siblings(row)))


def _cell(cells, columns, name):
    position = columns.get(name, 0)
    return cells[position] if position < len(cells) else None


def _cell_text(cells, columns, name):
    cell = _cell(cells, columns, name)
    return "" if cell is None else cell.get_text()


def _parse_characteristics(table):
    header_rows = list(
        _unique(sibling for sibling in map(_next_sibling, table.find_all("tr")) if sibling is not None)
    )
    columns = _column_index(header_rows)
    characteristics = []
    for row in _body_rows(table):
        cells = row.find_all("td")
        if not cells:
            continue
        if len(cells) == 1:
            if characteristics:
                characteristics[-1].value += "; " + cells[0].get_text().strip()
            continue
        characteristics.append(
            ItemCharacteristic(
                name=normalize_whitespace(_cell_text(cells, columns, "Наименование характеристики")),
                value=normalize_whitespace(_cell_text(cells, columns, "Значение характеристики")),
                unit=normalize_whitespace(_cell_text(cells, columns, "Единица измерения характеристики")),
                instruction=normalize_whitespace(
                    _cell_text(cells, columns, "Инструкция по заполнению характеристики в заявке")
                ),
            )
        )
    return characteristics


def _parse_items(table):
    columns = _column_index([table.find("tr")])
    for row in _body_rows(table):
        cells = row.find_all("td")
        if len(cells) < 7:
            continue

        name_cell = _cell(cells, columns, "Наименование товара, работы, услуги")
        name_html = "" if name_cell is None else name_cell.decode_contents()
        name_parts = name_html.split("<br/>")
        if len(name_parts) < 2:
            raise ValueError(f"position name has no identifier line: {name_html!r}")

        yield ProcurementItem(
            name=normalize_whitespace(name_parts[0]),
            identifier=normalize_whitespace(name_parts[1]),
            code=normalize_whitespace(_cell_text(cells, columns, "Код позиции")),
            item_type=normalize_whitespace(_cell_text(cells, columns, "Тип позиции")),
            unit=normalize_whitespace(_cell_text(cells, columns, "Единица измерения")),
            customer=normalize_whitespace(_cell_text(cells, columns, "Заказчик")),
            unit_price=parse_money(_cell_text(cells, columns, "Цена за единицу")),
            quantity=parse_money(_cell_text(cells, columns, "Количество (объем работы, услуги)")),
            total_price=parse_money(_cell_text(cells, columns, "Стоимость позиции")),
        )


def parse_items_and_characteristics(soup):
    """Read the positions table(s), pairing positions with characteristic tables in order."""
    tables = soup.select(_TABLE_SELECTOR)
    characteristic_groups = iter(
        [_parse_characteristics(table) for table in tables if _first_row_contains(table, _CHARACTERISTICS_MARKER)]
    )

    items = []
    for table in tables:
        if not _first_row_contains(table, _ITEMS_MARKER):
            continue
        for item in _parse_items(table):
            item.characteristics = next(characteristic_groups, [])
            items.append(item)
    return items


def parse_tender(html):
    """Parse the HTML of a notice print form into a :class:`Tender`."""
    soup = BeautifulSoup(html, "html.parser")
    params = parse_parameters(soup)

    def param(name):
        return params.get(name, "")

    return Tender(
        title=param("title"),
        subtitle=param("subtitle"),
        notice_number=param("Номер извещения"),
        object_name=param("Наименование объекта закупки"),
        procurement_method=param("Способ определения поставщика (подрядчика, исполнителя)"),
        placing_organization=param("Размещение осуществляет"),
        delivery_place=param("Место поставки товара, выполнения работы или оказания услуги"),
        electronic_platform=ElectronicPlatform(
            name=param("Наименование электронной площадки в информационно-телекоммуникационной сети «Интернет»"),
            url=param("Адрес электронной площадки в информационно-телекоммуникационной сети «Интернет»"),
        ),
        contact=ContactInfo(
            organization=param("Организация, осуществляющая размещение"),
            postal_address=param("Почтовый адрес"),
            location=param("Место нахождения"),
            responsible_person=param("Ответственное должностное лицо"),
            email=param("Адрес электронной почты"),
            phone=param("Номер контактного телефона"),
            fax=param("Факс"),
        ),
        procedure=ProcedureInfo(
            application_deadline=param("Дата и время окончания подачи заявок"),
            proposal_date=param("Дата рассмотрения заявок"),
            results_date=param("Дата подведения итогов определения поставщика (подрядчика, исполнителя)"),
        ),
        contract=ContractInfo(
            max_price=parse_money(param("Начальная (максимальная) цена контракта")),
            currency="RUB",
        ),
        execution=ExecutionInfo(
            start_date=param("Дата начала исполнения контракта"),
            end_date=param("Срок исполнения контракта"),
            budget_funded=param("Закупка за счет бюджетных средств"),
            own_funded=param("Закупка за счет собственных средств организации"),
        ),
        security=ApplicationSecurityInfo(
            amount=parse_money(param("Обеспечение исполнения контракта")),
        ),
        items=parse_items_and_characteristics(soup),
    )