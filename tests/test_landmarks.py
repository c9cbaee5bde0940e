"""
Landmark source tests: tooth library, bone/nerve landmarks, site planning.
"""

import pytest

from implant_guide.landmarks import (
    DEFAULT_BONE,
    SiteNotFoundError,
    TOOTH_LIBRARY,
    get_bone_data,
    get_nerve_data,
    get_site_landmarks,
    get_tooth,
    list_teeth,
    plan_site,
)


def test_tooth_library_has_full_adult_dentition():
    assert len(TOOTH_LIBRARY) == 32
    ids = [tooth.id for tooth in list_teeth()]
    assert ids == sorted(ids)
    assert ids[0] == 11 and ids[-1] == 48


def test_get_tooth():
    tooth = get_tooth(36)
    assert tooth.name == "Lower Left First Molar"
    assert tooth.mesiodistal_width == 11.0
    assert tooth.position.as_tuple() == (-38.0, -25.0, 0.0)


def test_get_tooth_unknown_raises():
    with pytest.raises(SiteNotFoundError, match="Tooth 99 not found"):
        get_tooth(99)


def test_site_not_found_is_lookup_error():
    with pytest.raises(LookupError):
        get_site_landmarks(19)


def test_nerve_data_only_for_lower_jaw():
    assert get_nerve_data(11) is None
    assert get_nerve_data(28) is None
    assert get_nerve_data(39) is None  # Lower range, but not a tooth


def test_nerve_data_lower_molar():
    nerve = get_nerve_data(46)
    assert len(nerve.points) == 5
    # Canal 15mm below the tooth, highest point under the tooth itself
    assert nerve.points[2].as_tuple() == (38.0, -38.0, -2.0)
    assert nerve.points[0].y == -40.0
    assert nerve.safety_plane_y == -36.5


def test_bone_data_lower_tooth():
    bone = get_bone_data(36)
    assert bone["crest_level"] == -23.0
    assert bone["nerve_level"] == -40.0
    assert bone["buccal_z"] == 5.25
    assert bone["lingual_z"] == -5.25
    assert bone["slope"] == 0.0


def test_bone_data_upper_tooth():
    bone = get_bone_data(16, slope=4.0)
    assert bone["crest_level"] == -2.0
    assert bone["nerve_level"] == -30.0
    assert bone["slope"] == 4.0


def test_bone_data_unknown_tooth_uses_defaults():
    bone = get_bone_data(99)
    for key, value in DEFAULT_BONE.items():
        assert bone[key] == value


def test_site_landmarks_lower_molar():
    site = get_site_landmarks(36, slope=2.0)
    lm = site.landmarks
    assert (lm.mesial_x, lm.distal_x) == (-43.5, -32.5)
    assert (lm.crest_level, lm.nerve_level) == (-23.0, -40.0)
    assert lm.bone_slope == 2.0
    assert site.nerve is not None


def test_plan_site_lower_molar():
    """Lower 36: 14.5mm box, 13.5mm safe length -> 13mm x 6mm implant."""
    site, result = plan_site(36, bone_slope=10)
    spec = result.implant_spec
    assert spec.length == 13.0
    assert spec.diameter == 6.0
    assert spec.angle == 5.0
    assert spec.position.z == result.bounding_box.center.z - 0.5


def test_plan_site_unknown_propagates():
    with pytest.raises(SiteNotFoundError):
        plan_site(50)


@pytest.mark.parametrize("tooth_id", sorted(TOOTH_LIBRARY))
def test_every_library_site_plans_safely(tooth_id):
    site, result = plan_site(tooth_id)
    assert result.bounding_box.dimensions.y > 0
    assert result.safety_margins.to_nerve > 1.5
