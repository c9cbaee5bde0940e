"""
API tests: health, planning, tooth library, standards.
"""


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


# ============================================================
# /api/plan
# ============================================================

def test_calculate_plan(client, reference_landmarks):
    resp = client.post("/api/plan/calculate", json=reference_landmarks)
    assert resp.status_code == 200
    data = resp.json()
    assert data["bounding_box"]["min"]["y"] == 11.5
    assert data["bounding_box"]["max"]["y"] == 19.0
    spec = data["implant_spec"]
    assert spec["length"] == 6.0
    assert spec["diameter"] == 6.0
    assert spec["angle"] == 2.5
    assert spec["position"] == {"x": 0.0, "y": 15.25, "z": -0.5}
    assert spec["direction"] == {"x": 0.0, "y": 1.0, "z": 0.0}
    assert data["safety_margins"]["to_nerve"] == 2.25


def test_calculate_plan_bone_slope_optional(client, reference_landmarks):
    body = dict(reference_landmarks)
    del body["bone_slope"]
    resp = client.post("/api/plan/calculate", json=body)
    assert resp.status_code == 200
    assert resp.json()["implant_spec"]["angle"] == 0.0


def test_calculate_plan_missing_field(client, reference_landmarks):
    body = dict(reference_landmarks)
    del body["nerve_level"]
    resp = client.post("/api/plan/calculate", json=body)
    assert resp.status_code == 422


def test_calculate_plan_rejects_non_finite_landmarks(client, reference_landmarks):
    """inf and nan are refused at the boundary with a 422, never a 500."""
    for field, value in [("crest_level", "inf"), ("nerve_level", "-inf"), ("bone_slope", "nan")]:
        body = {**reference_landmarks, field: value}
        resp = client.post("/api/plan/calculate", json=body)
        assert resp.status_code == 422, field


def test_calculate_plan_huge_crest_level(client, reference_landmarks):
    """Finite values too large to round still produce a plan."""
    body = {**reference_landmarks, "crest_level": 1e306}
    resp = client.post("/api/plan/calculate", json=body)
    assert resp.status_code == 200
    assert resp.json()["implant_spec"]["length"] == 15.0


def test_calculate_plan_unsafe_geometry(client, reference_landmarks):
    body = {**reference_landmarks, "crest_level": 12}
    resp = client.post("/api/plan/calculate", json=body)
    assert resp.status_code == 422
    assert "No vertical clearance" in resp.json()["detail"]


def test_calculate_plan_strict_mode(client, reference_landmarks, strict_sizing):
    body = {**reference_landmarks, "crest_level": 17}
    resp = client.post("/api/plan/calculate", json=body)
    assert resp.status_code == 422
    assert "smallest standard implant" in resp.json()["detail"]


def test_plan_site(client):
    resp = client.get("/api/plan/sites/36", params={"bone_slope": 10})
    assert resp.status_code == 200
    data = resp.json()
    assert data["tooth_id"] == 36
    assert data["landmarks"]["crest_level"] == -23.0
    assert data["result"]["implant_spec"]["length"] == 13.0
    assert data["result"]["implant_spec"]["angle"] == 5.0
    assert data["safety_plane_y"] == -36.5
    # 11mm gap: 60-70% ideal diameter range
    assert data["diameter_window"] == [6.6, 7.7]


def test_plan_site_upper_has_no_nerve_plane(client):
    resp = client.get("/api/plan/sites/11")
    assert resp.status_code == 200
    assert resp.json()["safety_plane_y"] is None


def test_plan_site_not_found(client):
    resp = client.get("/api/plan/sites/99")
    assert resp.status_code == 404
    assert "not found" in resp.json()["detail"]


# ============================================================
# /api/teeth + /api/standards
# ============================================================

def test_list_teeth(client):
    resp = client.get("/api/teeth/")
    assert resp.status_code == 200
    assert len(resp.json()) == 32


def test_get_tooth(client):
    resp = client.get("/api/teeth/21")
    assert resp.status_code == 200
    assert resp.json()["name"] == "Upper Left Central Incisor"


def test_get_tooth_not_found(client):
    assert client.get("/api/teeth/99").status_code == 404


def test_get_tooth_landmarks(client):
    resp = client.get("/api/teeth/46/landmarks")
    assert resp.status_code == 200
    data = resp.json()
    assert data["landmarks"]["mesial_x"] == 32.5
    assert len(data["nerve"]["points"]) == 5


def test_standards(client):
    resp = client.get("/api/standards/")
    assert resp.status_code == 200
    data = resp.json()
    assert data["lengths"] == [6.0, 7.0, 8.0, 8.5, 10.0, 11.5, 13.0, 15.0]
    assert data["diameters"] == [3.0, 3.5, 4.0, 4.5, 5.0, 5.5, 6.0]
    assert data["nerve_margin"] == 1.5
    assert data["crest_margin"] == 1.0
    assert data["lingual_offset"] == 0.5
