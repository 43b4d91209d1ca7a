"""Tests jobs — un job par variante, noms, contenus isolés, détection intégrée."""
import sys, os, logging
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from unittest.mock import patch, MagicMock
import pytest
import requests

from variant_extractor.core.schemas import ContentRef, PersonalizationContainer, VariantInfo
from variant_extractor.jobs import plan_variant_jobs, variant_jobs_for


def _resp(body=None, status=200):
    resp = MagicMock()
    resp.status_code = status
    if status >= 400:
        resp.raise_for_status.side_effect = requests.HTTPError(f"{status} Error", response=resp)
    else:
        resp.raise_for_status = MagicMock()
    resp.json.return_value = body
    return resp


@pytest.fixture
def content_item():
    return {"id": "abc123", "data": {"title": "Home", "blocks": [{"id": "root"}]}, "meta": {}}


@pytest.fixture
def containers():
    return [
        PersonalizationContainer(container_block_id="pc-1", variants=[
            VariantInfo(index=0, name="EU - French", blocks=[{"id": "fr"}], target_locales=["fr-FR"]),
            VariantInfo(index=1, blocks=[{"id": "de"}], target_locales=["de-DE", "de-AT"]),
        ]),
        PersonalizationContainer(container_block_id="pc-2", variants=[
            VariantInfo(index=0, name="Spain", blocks=[{"id": "es"}], target_locales=["es-ES"]),
        ]),
    ]


class TestPlanVariantJobs:
    def test_un_job_par_variante(self, content_item, containers):
        jobs = plan_variant_jobs(content_item, containers)
        assert [j.job_name for j in jobs] == ["abc123-eu-french", "abc123-variant-1", "abc123-spain"]
        assert [j.container_block_id for j in jobs] == ["pc-1", "pc-1", "pc-2"]

    def test_contenu_isole(self, content_item, containers):
        job = plan_variant_jobs(content_item, containers)[1]
        assert job.content["data"]["blocks"] == [{"id": "de"}]
        assert job.content["data"]["title"] == "Home"
        meta = job.content["meta"]["variantMetadata"]
        assert meta["variantIndex"] == 1
        assert meta["targetLocales"] == ["de-DE", "de-AT"]
        assert content_item["data"]["blocks"] == [{"id": "root"}]

    def test_locales(self, content_item, containers):
        jobs = plan_variant_jobs(content_item, containers)
        assert jobs[1].target_locales == ["de-DE", "de-AT"]

    def test_aucun_container(self, content_item):
        assert plan_variant_jobs(content_item, []) == []

    def test_doublons_signales(self, content_item, caplog):
        same = [
            PersonalizationContainer(container_block_id="a", variants=[VariantInfo(index=0)]),
            PersonalizationContainer(container_block_id="b", variants=[VariantInfo(index=0)]),
        ]
        with caplog.at_level(logging.WARNING, logger="variant_extractor.jobs"):
            jobs = plan_variant_jobs(content_item, same)
        assert [j.job_name for j in jobs] == ["abc123-variant-0", "abc123-variant-0"]
        assert any("abc123-variant-0" in r.getMessage() for r in caplog.records)

    def test_dump_camel_case(self, content_item, containers):
        dumped = plan_variant_jobs(content_item, containers)[0].model_dump(by_alias=True)
        assert dumped["jobName"] == "abc123-eu-french"
        assert dumped["targetLocales"] == ["fr-FR"]


class TestVariantJobsFor:
    def _doc(self):
        return {
            "id": "abc123",
            "data": {"blocks": [{
                "id": "pc-1",
                "component": {"name": "PersonalizationContainer", "options": {"variants": [
                    {"name": "FR", "query": [{"property": "locale", "operator": "is", "value": "fr"}],
                     "blocks": [{"id": "b-fr"}]},
                ]}},
            }]},
        }

    def test_detection_puis_plan(self):
        with patch("requests.get", return_value=_resp(self._doc())):
            jobs = variant_jobs_for({"id": "abc123", "modelName": "page"}, "KEY")
        assert len(jobs) == 1
        assert jobs[0].job_name == "abc123-fr"
        assert jobs[0].target_locales == ["fr"]
        assert jobs[0].content["meta"]["variantMetadata"]["originalContentId"] == "abc123"

    def test_content_item_explicite(self):
        item = {"id": "abc123", "data": {"title": "Full"}}
        with patch("requests.get", return_value=_resp(self._doc())):
            jobs = variant_jobs_for({"id": "abc123"}, "KEY", content_item=item)
        assert jobs[0].content["data"]["title"] == "Full"

    def test_content_ref(self):
        with patch("requests.get", return_value=_resp(self._doc())):
            jobs = variant_jobs_for(ContentRef(id="abc123", model_name="page"), "KEY")
        assert jobs[0].content["modelName"] == "page"

    def test_echec_fetch(self):
        with patch("requests.get", return_value=_resp(status=500)):
            assert variant_jobs_for({"id": "abc123"}, "KEY") == []
