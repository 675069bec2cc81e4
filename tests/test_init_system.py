import pytest

from hostfetch.modules.base import CommandResult
from hostfetch.modules.init_system import InitSystemProbe


def detect(fake_root, runner):
    return InitSystemProbe(runner=runner, root=fake_root.path).run()


def test_systemd_marker_beats_everything(fake_root, runner):
    fake_root.mkdir("/run/systemd/system")
    fake_root.mkdir("/etc/runit")
    fake_root.mkdir("/etc/init.d")
    fake_root.mkdir("/etc/runlevels")
    fake_root.write("/etc/init/tty.conf")
    fake_root.mkdir("/etc/s6")
    runner.add(["ps", "ax"], "    1 ?        Ss     0:00 runit\n")

    assert detect(fake_root, runner) == "systemd"
    assert not runner.called(["ps", "ax"])


@pytest.mark.parametrize("ps_output", [
    "    1 ?        Ss     0:00 runit\n",
    "    1 ?        Ss     0:00 /sbin/runit\n",
])
def test_runit_from_process_list(fake_root, runner, ps_output):
    fake_root.mkdir("/etc/init.d")
    fake_root.mkdir("/etc/runlevels")
    runner.add(["ps", "ax"], ps_output)
    assert detect(fake_root, runner) == "runit"


@pytest.mark.parametrize("marker", ["/etc/runit", "/etc/sv", "/run/runit", "/var/service"])
def test_runit_from_markers(fake_root, runner, marker):
    fake_root.mkdir(marker)
    runner.add(["ps", "ax"], "    1 ?        Ss     0:00 /sbin/init\n")
    assert detect(fake_root, runner) == "runit"


def test_openrc_needs_both_directories(fake_root, runner):
    fake_root.mkdir("/etc/init.d")
    assert detect(fake_root, runner) == "unknown"

    fake_root.mkdir("/etc/runlevels")
    assert detect(fake_root, runner) == "openrc"


def test_upstart_needs_a_conf_job(fake_root, runner):
    fake_root.write("/etc/init/README")
    assert detect(fake_root, runner) == "unknown"

    fake_root.write("/etc/init/tty1.conf", "start on runlevel [2345]\n")
    assert detect(fake_root, runner) == "upstart"


@pytest.mark.parametrize("marker,expected", [
    ("/etc/s6", "s6"),
    ("/bin/s6-svscan", "s6"),
    ("/etc/dinit.d", "dinit"),
    ("/bin/dinit", "dinit"),
])
def test_s6_and_dinit_markers(fake_root, runner, marker, expected):
    if marker.startswith("/bin"):
        fake_root.write(marker)
    else:
        fake_root.mkdir(marker)
    assert detect(fake_root, runner) == expected


def test_s6_is_checked_before_dinit(fake_root, runner):
    fake_root.mkdir("/etc/s6")
    fake_root.mkdir("/etc/dinit.d")
    assert detect(fake_root, runner) == "s6"


@pytest.mark.parametrize("target,expected", [
    ("/lib/systemd/systemd", "systemd"),
    ("/sbin/upstart", "upstart"),
    ("/sbin/openrc-init", "openrc"),
    ("/usr/bin/runit-init", "runit"),
    ("/usr/bin/s6-linux-init", "s6"),
    ("/usr/sbin/dinit", "dinit"),
    ("/sbin/busybox", "unknown"),
])
def test_init_symlink_fallback(fake_root, runner, target, expected):
    fake_root.write("/sbin/init")
    runner.add(["readlink", "-f", "/sbin/init"], target + "\n")
    assert detect(fake_root, runner) == expected


def test_init_symlink_needs_init_binary(fake_root, runner):
    runner.add(["readlink", "-f", "/sbin/init"], "/lib/systemd/systemd\n")
    assert detect(fake_root, runner) == "unknown"
    assert not runner.called(["readlink", "-f", "/sbin/init"])


def test_process_list_used_even_when_ps_fails(fake_root, runner):
    runner.add(["ps", "ax"], CommandResult(False, "    1 ?        Ss     0:00 runit\n"))
    assert detect(fake_root, runner) == "runit"
