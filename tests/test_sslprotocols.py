from kuruk import sslprotocols
from kuruk.sslprotocols import simulation_control_port


def test_blue_team_port():
    assert simulation_control_port(True) == 10301


def test_yellow_team_port():
    assert simulation_control_port(False) == 10302


def test_team_ports_match_constants():
    assert simulation_control_port(True) == sslprotocols.SSL_SIMULATION_CONTROL_BLUE_PORT
    assert simulation_control_port(False) == sslprotocols.SSL_SIMULATION_CONTROL_YELLOW_PORT
    assert simulation_control_port(True) != simulation_control_port(False)


def test_team_ports_follow_general_control_port():
    base = sslprotocols.SSL_SIMULATION_CONTROL_PORT
    assert simulation_control_port(True) == base + 1
    assert simulation_control_port(False) == base + 2