# maidata

`maidata` models the contents of simai chart files (`maidata.txt`) and
simulates how the notes of a chart are judged while touch sensors are
pressed and released.

It has no dependencies outside the standard library.

## What is inside

- `maidata.notes`: keys (`Key`), touch sensors (`TouchSensor`), beat and
  second durations (`NumBeatsParams`, `SecondsDuration`) and the parameters
  of tap, touch, hold and touch-hold notes (`TapParams`, `TouchParams`,
  `HoldParams`, `TouchHoldParams`). `str()` of each value gives its simai
  notation.
- `maidata.slide`: slide segments, tracks and durations (`SlideDuration`,
  `SlideSegment`, `SlideTrack`, `SlideParams`). Durations can be added with
  `+`. The sum is `None` when the two durations cannot be combined.
- `maidata.insn`: raw chart instructions: `BpmParams`, `BeatDivisor`,
  `Rest`, `NoteBundle` and `EndMark`. `format_raw_insn` prints an
  instruction the way it is written in a chart, and `note_type` tells the
  kind of a note.
- `maidata.keyval`: splits a `maidata.txt` file into its `&key=value`
  pairs (`lex_keyvals`, `KeyVal`).
- `maidata.diag`: warnings and errors collected while reading a chart
  (`State`, `WarningMessage`, `ErrorMessage`, `Spanned`). Each message has a
  readable `str()` and a `to_json()` form.
- `maidata.app`: `read_file` and `print_state_messages` for small tools.
- `maidata.judge`: the judge. It has timing windows (`judge_data.JudgeData`,
  `core.Timing`), judged notes (`taps.Tap`, `taps.Touch`, `taps.Hold`,
  `taps.TouchHold`, `slides.Slide`, `slides.FanSlide`) and
  `simulator.MaiSimulator`, which feeds sensor changes to the notes.

## Reading a chart file

```python
from maidata.app import read_file
from maidata.keyval import lex_keyvals

text = read_file("maidata.txt")
for kv in lex_keyvals(text):
    print(kv.key, "=", kv.val)
```

A byte-order mark at the start of the text is skipped. Trailing spaces,
tabs and newlines are stripped from every value. If anything is left over
that is not a `&key=value` pair, `lex_keyvals` raises `ValueError`.

## Keys and sensors

```python
from maidata.notes import Key, TouchSensor

key = Key(2)                      # third key, prints as "3"
sensor = TouchSensor("B", 4)      # prints as "B5"
centre = TouchSensor("C")         # prints as "C"
print(key, sensor, centre)
```

Indices are zero-based, and printed forms count from 1. Valid sensors are
groups `A`, `B`, `D` and `E` with index 0 to 7, and `C` with no index.
Any other combination raises `TouchSensorParseError`. A key outside 0 to 7
raises `KeyParseError`.

`Key.from_str` and `TouchSensor.from_str` read their digit as the
zero-based index itself:

- `Key.from_str("2")` is `Key(2)`.
- `TouchSensor.from_str("B4")` is `TouchSensor("B", 4)`.

## Simulating judgement

```python
from maidata.judge.simulator import MaiSimulator
from maidata.judge.taps import Tap
from maidata.notes import Key, TouchSensor

simulator = MaiSimulator()
simulator.add_note(Tap(Key(0), 1.0))
simulator.change_sensor(TouchSensor("A", 0), 1.0)   # press
simulator.change_sensor(TouchSensor("A", 0), 1.1)   # release
simulator.finish()
print(simulator.judge_results())
print(simulator.worst_judge_result())
```

- **Adding notes:** notes on the same sensor must be added in order of
  start time. Otherwise `add_note` raises `ValueError`.
- **`change_sensor`** toggles a sensor and returns whether it is now on.
- **`finish`** judges every note still open, so afterwards every note has
  a result.
- **`worse_judge_result`** picks whichever of two timings lies further
  from `Timing.CRITICAL`.
- **`print_judge_result`** prints each note's result on its own line.

## What it does not do

The package reads the key-value layout of a chart file but does not
parse the note notation inside a value into instructions. It does not
collect per-difficulty metadata (designer, level, offset). It does not
turn a chart into timed notes for the judge, and it has no slide path
tables. Judged notes, including slide paths, must be built by hand. There
are no command-line tools.

## Running the tests

Install the `test` extra and run `pytest` from the project directory.