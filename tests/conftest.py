import pytest

PROBLEM_URL = "https://infoarena.ro/problema/fact"

DEFAULT_DETAILS = [
    "Fişierul intrare/ieşire:",
    "fact.in, fact.out",
    "Sursa",
    "ONI 2003, clasa a IX-a",
    "Autor",
    "Mihai Scortaru",
    "Adăugată de",
    "domino",
    "Timp execuţie pe test",
    "0.1 sec",
    "Limită de memorie",
    "65536 kbytes",
]


def _details_table(cells, with_tbody=True):
    rows = []
    for start in range(0, len(cells), 4):
        tds = "".join(f"<td>{cell}</td>" for cell in cells[start : start + 4])
        rows.append(f"<tr>{tds}</tr>")
    body = "".join(rows)
    if with_tbody:
        body = f"<tbody>{body}</tbody>"
    return f'<table cellspacing="0" class="problem">{body}</table>'


def _example_table(header, rows, with_tbody=False):
    ths = "".join(f"<th>{cell}</th>" for cell in header)
    trs = [f"<tr>{ths}</tr>"] if header else []
    for row in rows:
        tds = "".join(f"<td><pre>{cell}</pre></td>" for cell in row)
        trs.append(f"<tr>{tds}</tr>")
    body = "".join(trs)
    if with_tbody:
        body = f"<tbody>{body}</tbody>"
    return f'<table class="example">{body}</table>'


def build_page(
    *,
    title="Fact",
    details=None,
    with_details=True,
    with_tbody=True,
    second_heading="Date de intrare",
    header=("fact.in", "fact.out"),
    rows=(("5", "10"),),
    with_example=True,
    example_tbody=False,
    banner=True,
):
    """Render markup laid out like an InfoArena problem page."""
    parts = ["<html><head><title>infoarena</title></head><body>"]
    if banner:
        parts.append('<div id="header"><h1><a href="/">infoarena</a></h1></div>')
    parts.append('<div id="main">')
    if title is not None:
        parts.append(f"<h1>\n  {title}  \n</h1>")
    if with_details:
        parts.append(_details_table(DEFAULT_DETAILS if details is None else details, with_tbody))
    parts.append("<h2>Enunţ</h2><p>Se dă un număr natural N.</p>")
    if second_heading is not None:
        parts.append(f"<h2>{second_heading}</h2><p>Fişierul de intrare conţine N.</p>")
    parts.append("<h2>Exemplu</h2>")
    if with_example:
        parts.append(_example_table(header, rows, example_tbody))
    parts.append("</div></body></html>")
    return "\n".join(parts)


@pytest.fixture
def page_factory():
    return build_page


@pytest.fixture
def batch_page():
    return build_page(rows=[("1 2", "3"), ("5 5", "10")])


@pytest.fixture
def interactive_page():
    return build_page(
        second_heading="Interacţiune",
        header=("stdin", "stdout"),
        rows=[("a", "c"), ("b", "d")],
    )


@pytest.fixture
def details_with():
    """Default details cells with some fields replaced."""
    positions = {"files": 1, "category": 3, "time": 9, "memory": 11}

    def _details_with(**overrides):
        cells = list(DEFAULT_DETAILS)
        for name, value in overrides.items():
            cells[positions[name]] = value
        return cells

    return _details_with


@pytest.fixture
def default_details():
    return list(DEFAULT_DETAILS)
