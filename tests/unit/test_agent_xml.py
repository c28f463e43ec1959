import xml.etree.ElementTree as ET

import pytest

from swivel_mfa.domain.entities import SwivelConfig, VerificationRequest
from swivel_mfa.infrastructure.swivel.agent_xml import (
    AgentXmlParseError,
    build_login_request,
    parse_response,
)


def test_login_request_body():
    req = VerificationRequest.login(
        SwivelConfig("https://swivel", "shh"), "jane<doe>", "4321"
    )

    root = ET.fromstring(build_login_request(req))

    assert root.tag == "SASRequest"
    assert root.findtext("Version") == "3.4"
    assert root.findtext("Secret") == "shh"
    assert root.findtext("Action") == "login"
    assert root.findtext("Username") == "jane<doe>"
    assert (root.findtext("Password") or "") == ""
    assert root.findtext("OTC") == "4321"


def test_parse_pass():
    reply = parse_response(
        '<?xml version="1.0" ?><SASResponse secret="x" version="3.4">'
        "<Result>PASS</Result></SASResponse>"
    )
    assert reply.passed
    assert reply.agent_error == ""


def test_parse_fail_with_error():
    reply = parse_response(
        "<SASResponse><Result>FAIL</Result>"
        "<Error> AGENT_ERROR_NO_PIN </Error></SASResponse>"
    )
    assert not reply.passed
    assert reply.agent_error == "AGENT_ERROR_NO_PIN"


@pytest.mark.parametrize(
    "body",
    [
        "",
        "not xml at all",
        "<html><body>Tomcat</body></html>",
        "<SASResponse></SASResponse>",
        "<SASResponse><Result>MAYBE</Result></SASResponse>",
    ],
)
def test_parse_rejects_non_definitive_bodies(body):
    with pytest.raises(AgentXmlParseError):
        parse_response(body)
