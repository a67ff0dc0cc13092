import os

import pytest

import main
import simulation


@pytest.fixture(autouse=True)
def no_sleep(monkeypatch):
    monkeypatch.setattr(simulation.time, "sleep", lambda seconds: None)


def test_default_run(capsys):
    assert main.main([]) == 0

    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 101
    assert lines[0] == "Position: (0.00, -0.00), Velocity: (0.00, -0.10)"
    assert lines[-1] == "Finished after 100 steps (alive, age=0.00s)"


def test_steps_and_quiet(capsys):
    assert main.main(["--preset", "aging", "--steps", "3", "--quiet"]) == 0

    assert capsys.readouterr().out.splitlines() == [
        "Finished after 3 steps (alive, age=0.03s)"
    ]


def test_zero_mass_is_fatal(capsys):
    assert main.main(["--mass", "0", "--quiet"]) == 1

    captured = capsys.readouterr()
    assert captured.out.startswith("Error: Mass must be finite and greater than zero")
    assert "InvalidMassError" in captured.err


def test_short_lifespan_until_dead(capsys):
    status = main.main(
        ["--preset", "short-lived", "--lifespan", "1.0", "--dt", "0.25", "--quiet"]
    )

    assert status == 0
    assert capsys.readouterr().out.splitlines() == [
        "Finished after 4 steps (dead, age=1.00s)"
    ]


def test_render_frames(tmp_path, capsys):
    output = tmp_path / "frames"

    status = main.main(
        ["--steps", "3", "--render", "--trail", "--output", str(output), "--quiet"]
    )

    assert status == 0
    assert sorted(os.listdir(output)) == [
        "frame_00000.png",
        "frame_00001.png",
        "frame_00002.png",
    ]
    assert f"Saved 3 frames to {output}" in capsys.readouterr().out


def test_trail_preset_with_gif(tmp_path):
    gif = tmp_path / "particle.gif"

    status = main.main(
        [
            "--preset", "trail",
            "--lifespan", "0.5",
            "--output", str(tmp_path / "frames"),
            "--gif", str(gif),
            "--quiet",
        ]
    )

    assert status == 0
    assert gif.is_file()
    assert len(os.listdir(tmp_path / "frames")) >= 5


def test_lifespan_and_no_lifecycle_are_exclusive():
    with pytest.raises(SystemExit):
        main.main(["--lifespan", "1", "--no-lifecycle"])


def test_no_lifecycle_needs_steps(capsys):
    assert main.main(["--preset", "short-lived", "--no-lifecycle", "--quiet"]) == 1
    assert "max_steps is required" in capsys.readouterr().out
