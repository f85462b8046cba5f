import math

from sp3merge.core.types import FRAME_COLUMNS, MergedEphemeris, Sample, Sp3Document


def test_object_ephemeris_span(make_ephemeris, at):
    eph = make_ephemeris([3, 1, 2])

    assert len(eph) == 3
    assert eph.start == at(1)
    assert eph.stop == at(3)


def test_empty_ephemeris_span(make_ephemeris):
    eph = make_ephemeris([])

    assert eph.start is None
    assert eph.stop is None


def test_merged_to_frame(make_sample, at):
    merged = MergedEphemeris(
        object_id="L51",
        frame="ITRF",
        time_system="GPS",
        samples=(make_sample(0), make_sample(1, velocity=None)),
    )

    df = merged.to_frame()

    assert list(df.columns) == FRAME_COLUMNS
    assert len(df) == 2
    assert df.loc[0, "vx"] == 1.0
    assert math.isnan(df.loc[1, "vz"])
    assert merged.start == at(0)
    assert merged.stop == at(1)


def test_sample_has_velocity(make_sample):
    assert make_sample(0).has_velocity
    assert not make_sample(0, velocity=None).has_velocity


def test_document_spans_all_objects(make_ephemeris, at):
    doc = Sp3Document(
        source="x.sp3",
        version="c",
        pos_vel_flag="V",
        coordinate_system="ITRF",
        time_system="GPS",
        agency="TEST",
        num_epochs=3,
        ephemerides={
            "L51": make_ephemeris([1, 2]),
            "G01": make_ephemeris([0, 5], object_id="G01"),
            "G02": make_ephemeris([], object_id="G02"),
        },
    )

    assert doc.object_ids == ["L51", "G01", "G02"]
    assert doc.start == at(0)
    assert doc.stop == at(5)
    assert doc.get("G09") is None
