# tests/unit/cli/test_output_manager.py
# Unit tests for OutputManager implementation

from mynl.cli.output_manager import OutputManager
from mynl.core.output import (
    NullOutputManager,
    OutputInterface,
    OutputLevel,
    get_output_manager,
    reset_output_manager,
)
from mynl.core.types import LineRecord
from mynl.core.verbose import dlog_record, init_verbose, vlog, warn


class TestOutputManagerBasics:

    # * Verify OutputManager implements protocol
    def test_implements_protocol(self):
        assert isinstance(OutputManager(), OutputInterface)
        assert isinstance(NullOutputManager(), OutputInterface)

    # * Verify default level is NORMAL
    def test_default_level_is_normal(self):
        assert OutputManager().get_level() == OutputLevel.NORMAL


class TestInitialize:

    def test_verbose_level(self):
        manager = OutputManager()
        manager.initialize(requested_level=OutputLevel.VERBOSE)
        assert manager.is_verbose_enabled() is True
        assert manager.is_debug_enabled() is False

    # * Verify DEBUG requires dev_mode
    def test_debug_requires_dev_mode(self):
        manager = OutputManager()
        manager.initialize(requested_level=OutputLevel.DEBUG, dev_mode=False)
        assert manager.get_level() == OutputLevel.VERBOSE

        manager.initialize(requested_level=OutputLevel.DEBUG, dev_mode=True)
        assert manager.get_level() == OutputLevel.DEBUG

    # * Quiet overrides everything
    def test_quiet_wins(self):
        manager = OutputManager()
        manager.initialize(requested_level=OutputLevel.DEBUG, dev_mode=True, quiet=True)
        assert manager.get_level() == OutputLevel.QUIET


class TestOutput:

    # * Verbose messages go to stderr, never stdout
    def test_verbose_writes_stderr(self, capsys):
        manager = OutputManager()
        manager.initialize(requested_level=OutputLevel.VERBOSE)
        manager.verbose("Reading input", "FILE", detail="line one\nline two")

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "[FILE]" in captured.err
        assert "Reading input" in captured.err
        assert "line two" in captured.err

    # * Verbose messages are suppressed at NORMAL level
    def test_verbose_suppressed(self, capsys):
        manager = OutputManager()
        manager.initialize()
        manager.verbose("hidden")
        assert capsys.readouterr().err == ""

    # * Warnings are shown at NORMAL level
    def test_warning_shown(self, capsys):
        manager = OutputManager()
        manager.initialize()
        manager.warning("careful")
        assert "Warning: careful" in capsys.readouterr().err

    # * Log file receives plain-text messages
    def test_log_file(self, tmp_path):
        log_file = tmp_path / "logs" / "mynl.log"
        manager = OutputManager()
        manager.initialize(requested_level=OutputLevel.VERBOSE, log_file=log_file)
        manager.verbose("Numbering", "STAGE")
        manager.end_session()

        text = log_file.read_text(encoding="utf-8")
        assert "Session Started" in text
        assert "[STAGE] Numbering" in text
        assert "Session Ended" in text


class TestVerboseHelpers:

    # * init_verbose registers a real manager
    def test_init_verbose_registers(self):
        init_verbose(enabled=True)
        assert isinstance(get_output_manager(), OutputManager)
        assert get_output_manager().is_verbose_enabled() is True

    # * Helpers are no-ops before a manager is registered
    def test_null_manager_silent(self, capsys):
        reset_output_manager()
        vlog("FILE", "nothing")
        warn("nothing")
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == ""

    # * Quiet suppresses warnings
    def test_quiet_suppresses_warnings(self, capsys):
        init_verbose(quiet=True)
        warn("hidden")
        assert capsys.readouterr().err == ""

    # * Line records are traced only at DEBUG (verbose + dev mode)
    def test_record_trace_requires_debug(self, capsys):
        record = LineRecord(raw_text="\tx = 1", line_number=7)

        init_verbose(enabled=True, dev_mode=False)
        dlog_record(record)
        assert "[LINE]" not in capsys.readouterr().err

        init_verbose(enabled=True, dev_mode=True)
        dlog_record(record)
        err = capsys.readouterr().err
        assert "[LINE]" in err
        assert "7: '\\tx = 1'" in err
