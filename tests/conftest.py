"""Shared fixtures: a small chained ndb written into a temp directory."""

from types import SimpleNamespace

import pytest

LOCAL = """\
database=
	file="{local}"
	file="{common}"
	file="{extra}"

# hosts on the home network
ipnet=home ip=192.168.1.0 ipmask=255.255.255.0
	ipgw=192.168.1.1
	dns=192.168.1.1

sys=gnot ip=192.168.1.10 ether=0800690222f0
	dom=gnot.home.example # the workstation
	comment="big beige box"
"""

COMMON = """\
# services
tcp=echo port=7
udp=echo port=7
tcp=discard port=9
udp=discard port=9
tcp=ssh port=22
	protocol=tcp
udp=syslog port=514
tcp=http port=80 alias=www alias=web
"""

EXTRA = """\
sys=printer ip=192.168.1.20
	dom=printer.home.example
tcp=echo port=7007
"""


@pytest.fixture
def ndb_files(tmp_path):
    """Write local, common and extra files; local chains the other two."""
    paths = SimpleNamespace(
        dir=tmp_path,
        local=str(tmp_path / "local"),
        common=str(tmp_path / "common"),
        extra=str(tmp_path / "extra"),
    )
    (tmp_path / "local").write_text(
        LOCAL.format(local=paths.local, common=paths.common, extra=paths.extra)
    )
    (tmp_path / "common").write_text(COMMON)
    (tmp_path / "extra").write_text(EXTRA)
    return paths
