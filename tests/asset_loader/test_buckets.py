import pytest

import src.asset_loader.buckets as buckets_mod  # for monkeypatching LOGGER
from src.asset_loader.buckets import BucketDetails, collect_buckets, resolve_qualified_name
from src.asset_loader.models import AssetDetails
from src.enums import AnnouncementType, CertificateStatus
from tests.asset_loader.fakes import CONNECTION_CACHE, FakeLogger

# ---------- helpers ----------


def s3_row(**overrides):
    row = {
        "CONNECTOR": "s3",
        "CONNECTION": "aws",
        "BUCKET NAME": "my-bucket",
        "BUCKET ARN": "arn:aws:s3:::my-bucket",
    }
    row.update(overrides)
    return row


def gcs_row(**overrides):
    row = {"CONNECTOR": "gcs", "CONNECTION": "gcp", "BUCKET NAME": "my-bucket"}
    row.update(overrides)
    return row


def adls_row(**overrides):
    row = {
        "CONNECTOR": "adls",
        "CONNECTION": "azure",
        "ACCOUNT NAME": "acct1",
        "BUCKET NAME": "container1",
    }
    row.update(overrides)
    return row


@pytest.fixture
def log(monkeypatch):
    fake = FakeLogger()
    monkeypatch.setattr(buckets_mod, "LOGGER", fake, raising=True)
    return fake


# ---------- resolve_qualified_name ----------


def test_s3_qualified_name_is_connection_and_arn():
    assert (
        resolve_qualified_name(CONNECTION_CACHE, s3_row())
        == "default/s3/1700000000/arn:aws:s3:::my-bucket"
    )


def test_s3_qualified_name_is_deterministic_and_ignores_bucket_name():
    first = resolve_qualified_name(CONNECTION_CACHE, s3_row())
    second = resolve_qualified_name(CONNECTION_CACHE, s3_row(**{"BUCKET NAME": "renamed"}))
    assert first == second


@pytest.mark.parametrize("missing", ["BUCKET ARN", "BUCKET NAME"])
def test_s3_without_arn_or_name_has_no_qualified_name(missing):
    assert resolve_qualified_name(CONNECTION_CACHE, s3_row(**{missing: ""})) is None


def test_gcs_qualified_name():
    assert resolve_qualified_name(CONNECTION_CACHE, gcs_row()) == "default/gcs/123/my-bucket"


def test_gcs_does_not_need_arn():
    assert resolve_qualified_name(CONNECTION_CACHE, gcs_row(**{"BUCKET ARN": None})) is not None


def test_adls_qualified_name_goes_through_account():
    assert (
        resolve_qualified_name(CONNECTION_CACHE, adls_row())
        == "default/adls/123/acct1/container1"
    )


def test_adls_without_account_has_no_qualified_name():
    assert resolve_qualified_name(CONNECTION_CACHE, adls_row(**{"ACCOUNT NAME": ""})) is None


def test_unresolvable_connection_returns_none_without_logging(log):
    row = gcs_row(CONNECTION="not-cached")
    assert resolve_qualified_name(CONNECTION_CACHE, row) is None
    assert log.records == []


def test_non_object_store_connector_logs_error(log):
    row = {"CONNECTOR": "snowflake", "CONNECTION": "warehouse", "BUCKET NAME": "b"}
    assert resolve_qualified_name(CONNECTION_CACHE, row) is None
    assert log.messages("error") == ["Unknown connector type for object stores: snowflake"]


@pytest.mark.parametrize(
    "bucket_name, expected",
    [
        ("/", "default/gcs/123//"),
        ("/lead", "default/gcs/123//lead"),
        ("trail/", "default/gcs/123/trail/"),
    ],
)
def test_gcs_separator_cells_are_joined_verbatim(bucket_name, expected):
    row = gcs_row(**{"BUCKET NAME": bucket_name})
    assert resolve_qualified_name(CONNECTION_CACHE, row) == expected


def test_distinct_gcs_bucket_names_never_share_a_qualified_name():
    plain = resolve_qualified_name(CONNECTION_CACHE, gcs_row(**{"BUCKET NAME": "lead"}))
    slashed = resolve_qualified_name(CONNECTION_CACHE, gcs_row(**{"BUCKET NAME": "/lead"}))
    assert plain != slashed


def test_adls_separator_account_does_not_raise():
    row = adls_row(**{"ACCOUNT NAME": "/", "BUCKET NAME": "/"})
    assert resolve_qualified_name(CONNECTION_CACHE, row) == "default/adls/123////"


# ---------- BucketDetails.from_row ----------


@pytest.mark.parametrize("missing", ["CONNECTOR", "CONNECTION", "BUCKET NAME"])
def test_from_row_requires_connector_connection_and_bucket(missing):
    row = s3_row()
    row[missing] = "  "
    assert BucketDetails.from_row(CONNECTION_CACHE, row, "\n") is None
    del row[missing]
    assert BucketDetails.from_row(CONNECTION_CACHE, row, "\n") is None


def test_from_row_bucket_row_carries_full_metadata():
    row = s3_row(
        **{
            "DESCRIPTION": "Landing zone",
            "CERTIFICATE": "verified",
            "CERTIFICATE MESSAGE": "Checked by data team",
            "ANNOUNCEMENT": "Warning",
            "ANNOUNCEMENT TITLE": "Migration",
            "ANNOUNCEMENT MESSAGE": "Moving next week",
            "OWNER USERS": "alice\nbob",
            "OWNER GROUPS": "data-eng",
            "CLASSIFICATIONS": "PII\nConfidential",
        }
    )
    details = BucketDetails.from_row(CONNECTION_CACHE, row, "\n")

    assert details.connection_qualified_name == "default/s3/1700000000"
    assert details.name == "my-bucket"
    assert details.arn == "arn:aws:s3:::my-bucket"
    assert details.account_name is None
    assert details.description == "Landing zone"
    assert details.certificate is CertificateStatus.VERIFIED
    assert details.certificate_status_message == "Checked by data team"
    assert details.announcement_type is AnnouncementType.WARNING
    assert details.announcement_title == "Migration"
    assert details.announcement_message == "Moving next week"
    assert details.owner_users == ("alice", "bob")
    assert details.owner_groups == ("data-eng",)
    assert details.classifications == ("PII", "Confidential")
    assert details.is_minimal is False


def test_from_row_uses_given_delimiter():
    row = gcs_row(**{"OWNER USERS": "alice|bob"})
    assert BucketDetails.from_row(CONNECTION_CACHE, row, "|").owner_users == ("alice", "bob")


def test_from_row_object_row_gives_identity_only():
    row = adls_row(
        **{
            "OBJECT NAME": "data/file.csv",
            "DESCRIPTION": "about the object, not the container",
            "CLASSIFICATIONS": "PII",
        }
    )
    details = BucketDetails.from_row(CONNECTION_CACHE, row, "\n")

    assert details.is_minimal is True
    assert details.connection_qualified_name == "default/adls/123"
    assert details.account_name == "acct1"
    assert details.name == "container1"
    assert details.description is None
    assert details.classifications == ()


def test_from_row_keeps_row_when_connection_is_not_cached():
    details = BucketDetails.from_row(CONNECTION_CACHE, gcs_row(CONNECTION="unknown"), "\n")
    assert details is not None
    assert details.connection_qualified_name is None


def test_from_row_drops_unrecognised_certificate(monkeypatch):
    import src.asset_loader.models as models_mod

    fake = FakeLogger()
    monkeypatch.setattr(models_mod, "LOGGER", fake, raising=True)

    details = BucketDetails.from_row(CONNECTION_CACHE, gcs_row(CERTIFICATE="gold"), "\n")

    assert details.certificate is None
    assert fake.messages("warning") == ["Ignoring unrecognised CertificateStatus value: gold"]


# ---------- identity ----------


def test_identity_includes_empty_account_segment():
    details = BucketDetails.from_row(CONNECTION_CACHE, gcs_row(), "\n")
    assert details.identity == "default/gcs/123//my-bucket"


def test_identity_includes_account():
    details = BucketDetails.from_row(CONNECTION_CACHE, adls_row(), "\n")
    assert details.identity == "default/adls/123/acct1/container1"


def test_identity_belongs_to_bucket_details_only():
    common = AssetDetails(description="shared")

    assert not hasattr(common, "identity")
    assert common.description == "shared"


# ---------- collect_buckets ----------


def test_collect_buckets_keys_by_identity_and_skips_invalid_rows(log):
    rows = [gcs_row(), adls_row(), {"CONNECTOR": "gcs", "CONNECTION": "gcp"}]
    buckets = collect_buckets(CONNECTION_CACHE, rows, "\n")
    assert sorted(buckets) == ["default/adls/123/acct1/container1", "default/gcs/123//my-bucket"]


def test_collect_buckets_collapses_duplicate_identities(log):
    rows = [gcs_row(DESCRIPTION="first"), gcs_row(DESCRIPTION="second")]
    buckets = collect_buckets(CONNECTION_CACHE, rows, "\n")
    assert len(buckets) == 1
    assert buckets["default/gcs/123//my-bucket"].description == "first"


def test_collect_buckets_prefers_bucket_row_over_object_reference(log):
    rows = [
        gcs_row(**{"OBJECT NAME": "a.csv"}),
        gcs_row(DESCRIPTION="the bucket"),
        gcs_row(**{"OBJECT NAME": "b.csv"}),
    ]
    buckets = collect_buckets(CONNECTION_CACHE, rows, "\n")
    details = buckets["default/gcs/123//my-bucket"]
    assert details.is_minimal is False
    assert details.description == "the bucket"
