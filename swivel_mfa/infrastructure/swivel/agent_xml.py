# Swivel AgentXML wire format.
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional
import xml.etree.ElementTree as ET

from swivel_mfa.domain.entities import VerificationRequest

AGENT_XML_VERSION = "3.4"
RESULT_PASS = "PASS"
RESULT_FAIL = "FAIL"


class AgentXmlParseError(ValueError):
    """Body is not a usable SASResponse."""


@dataclass(frozen=True)
class AgentXmlReply:
    result: str
    agent_error: str = ""

    @property
    def passed(self) -> bool:
        return self.result == RESULT_PASS


def build_login_request(request: VerificationRequest) -> bytes:
    root = ET.Element("SASRequest")
    fields = (
        ("Version", AGENT_XML_VERSION),
        ("Secret", request.shared_secret),
        ("Action", "login"),
        ("Username", request.principal_id),
        ("Password", request.password),
        ("OTC", request.otc),
    )
    for tag, text in fields:
        ET.SubElement(root, tag).text = text
    return ET.tostring(root, encoding="utf-8", xml_declaration=True)


def _child_text(root: ET.Element, tag: str) -> Optional[str]:
    node = root.find(tag)
    if node is None or node.text is None:
        return None
    return node.text.strip()


def parse_response(body: str) -> AgentXmlReply:
    """
    Parse a SASResponse. Only PASS and FAIL count as a definitive answer,
    anything else raises AgentXmlParseError.
    """
    try:
        root = ET.fromstring(body)
    except ET.ParseError as e:
        raise AgentXmlParseError(f"malformed AgentXML response: {e}") from e

    if root.tag != "SASResponse":
        raise AgentXmlParseError(f"unexpected root element {root.tag!r}")

    result = (_child_text(root, "Result") or "").upper()
    if result not in (RESULT_PASS, RESULT_FAIL):
        raise AgentXmlParseError(f"no definitive result in response: {result!r}")

    return AgentXmlReply(result=result, agent_error=_child_text(root, "Error") or "")
