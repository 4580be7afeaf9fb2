from bs4 import BeautifulSoup

from webspider.formfields import Form, parse_form_fields

HTML_FORM_EXAMPLE = r"""<html>
<head>
	<title>HTML Form Test</title>
</head>
<body>
	<form method="POST" action="/test">  
		<input type="text" name="firstname"><br> 
		<textarea name=textarea1></textarea> 
		<select name=select1></select> 
		<input type=text /> 
	</form>  
	<form method=post action=https://abs.example.com></form>
	<form action=//prel.example.com></form>
	<form action=\\unc.example.com></form>
	<form action=/root_rel></form>
	<form action=path_rel></form>
	<form></form>
</body>
</html>"""


def test_parse_form_fields():
    forms = parse_form_fields(HTML_FORM_EXAMPLE, "https://example.com/path")

    assert forms[0].action == "https://example.com/test"
    assert forms[0].method == "POST"
    assert forms[1].method == "POST"
    assert forms[1].action == "https://abs.example.com"
    assert forms[2].method == "GET"
    assert forms[2].action == "//prel.example.com"
    assert forms[3].method == "GET"
    assert forms[3].action == "\\\\unc.example.com"
    assert forms[4].method == "GET"
    assert forms[4].action == "https://example.com/root_rel"
    assert forms[5].method == "GET"
    assert forms[5].action == "https://example.com/path/path_rel"
    assert forms[6].method == "GET"
    assert forms[6].action == "https://example.com/path"
    assert "firstname" in forms[0].parameters
    assert "textarea1" in forms[0].parameters
    assert "select1" in forms[0].parameters
    assert len(forms[0].parameters) == 3
    assert len(forms) == 7


def test_enctype_defaults():
    forms = parse_form_fields(HTML_FORM_EXAMPLE, "https://example.com/path")
    assert forms[0].enctype == "application/x-www-form-urlencoded"
    assert forms[2].enctype == ""


def test_explicit_enctype_kept():
    html = '<form method="post" enctype="multipart/form-data" action="/up"></form>'
    forms = parse_form_fields(html, "https://example.com/")
    assert forms == [
        Form(
            action="https://example.com/up",
            method="POST",
            enctype="multipart/form-data",
            parameters=[],
        )
    ]


def test_accepts_parsed_document():
    soup = BeautifulSoup('<form action="a"><input name="q"></form>', "html.parser")
    forms = parse_form_fields(soup, "https://example.com/dir")
    assert forms[0].action == "https://example.com/dir/a"
    assert forms[0].parameters == ["q"]


def test_no_forms():
    assert parse_form_fields("<html><body><p>hi</p></body></html>", "https://example.com") == []