import dataclasses
import json
import unittest

from cetus_sdk_config import burn_mainnet, vaults_mainnet, zap_testnet
from cetus_sdk_config.config import (
    BurnSdkOptions,
    Env,
    LifiConfig,
    MayanConfig,
    Package,
    SdkOptions,
    ZapSdkOptions,
    is_sui_address,
)
from cetus_sdk_config.errors import SdkConfigError

ADDRESS = "0x" + "ab" * 32
OTHER_ADDRESS = "0x" + "0c" * 32


class TestEnv(unittest.TestCase):
    def test_parse(self):
        self.assertIs(Env.parse("mainnet"), Env.MAINNET)
        self.assertIs(Env.parse("TESTNET"), Env.TESTNET)
        self.assertIs(Env.parse(Env.MAINNET), Env.MAINNET)

    def test_parse_unknown(self):
        with self.assertRaises(SdkConfigError) as ctx:
            Env.parse("devnet")
        self.assertEqual(ctx.exception.field, "env")

    def test_str_comparison(self):
        self.assertEqual(Env.TESTNET, "testnet")


class TestIsSuiAddress(unittest.TestCase):
    def test_valid(self):
        self.assertTrue(is_sui_address(ADDRESS))
        self.assertTrue(is_sui_address(burn_mainnet.burn.package_id))

    def test_invalid(self):
        self.assertFalse(is_sui_address(""))
        self.assertFalse(is_sui_address("0x12"))
        self.assertFalse(is_sui_address("ab" * 32))
        self.assertFalse(is_sui_address("0x" + "zz" * 32))
        self.assertFalse(is_sui_address(None))
        self.assertFalse(is_sui_address(ADDRESS + "::cetus::CETUS"))

    def test_uppercase_rejected(self):
        self.assertFalse(is_sui_address("0x" + "AB" * 32))
        self.assertFalse(is_sui_address(burn_mainnet.burn.package_id.upper().replace("0X", "0x")))


class TestPackage(unittest.TestCase):
    def test_valid_package(self):
        package = Package(package_id=ADDRESS, published_at=OTHER_ADDRESS, version=3, config={"manager_id": ADDRESS})
        package.validate("burn")

    def test_bad_package_id(self):
        package = Package(package_id="0x12", published_at=ADDRESS, version=1)
        with self.assertRaises(SdkConfigError) as ctx:
            package.validate("burn")
        self.assertEqual(ctx.exception.field, "burn.package_id")

    def test_bad_published_at(self):
        package = Package(package_id=ADDRESS, published_at="", version=1)
        with self.assertRaises(SdkConfigError) as ctx:
            package.validate("farms")
        self.assertEqual(ctx.exception.field, "farms.published_at")

    def test_version_must_be_positive(self):
        for version in (0, -1, True, "7"):
            package = Package(package_id=ADDRESS, published_at=ADDRESS, version=version)
            with self.assertRaises(SdkConfigError):
                package.validate()

    def test_version_may_be_omitted(self):
        Package(package_id=ADDRESS, published_at=ADDRESS).validate()

    def test_config_object_ids_checked(self):
        package = Package(package_id=ADDRESS, published_at=ADDRESS, version=1, config={"admin_cap_id": "0xnope"})
        with self.assertRaises(SdkConfigError) as ctx:
            package.validate("farms")
        self.assertEqual(ctx.exception.field, "farms.config.admin_cap_id")

    def test_empty_object_id_allowed(self):
        package = Package(package_id=ADDRESS, published_at=ADDRESS, config={"coin_list_id": "", "coin_list_handle": ""})
        package.validate()

    def test_other_roles_not_checked(self):
        package = Package(package_id=ADDRESS, published_at=ADDRESS, config={"cetus_coin_type": ADDRESS + "::cetus::CETUS"})
        package.validate()

    def test_config_is_read_only(self):
        with self.assertRaises(TypeError):
            burn_mainnet.burn.config["manager_id"] = ADDRESS

    def test_config_copied_on_construction(self):
        roles = {"manager_id": ADDRESS}
        package = Package(package_id=ADDRESS, published_at=ADDRESS, config=roles)
        roles["manager_id"] = OTHER_ADDRESS
        self.assertEqual(package.config["manager_id"], ADDRESS)

    def test_nested_config_frozen(self):
        events = vaults_mainnet.vest.config["create_event_list"]
        self.assertIsInstance(events, tuple)
        with self.assertRaises(TypeError):
            events[0]["vault_id"] = ADDRESS


class TestSdkOptions(unittest.TestCase):
    def test_frozen(self):
        with self.assertRaises(dataclasses.FrozenInstanceError):
            burn_mainnet.env = Env.TESTNET
        with self.assertRaises(dataclasses.FrozenInstanceError):
            burn_mainnet.burn.version = 8

    def test_env_coerced(self):
        options = SdkOptions(env="testnet")
        self.assertIs(options.env, Env.TESTNET)

    def test_unknown_env_rejected(self):
        with self.assertRaises(SdkConfigError):
            SdkOptions(env="localnet")

    def test_providers_become_tuple(self):
        options = SdkOptions(env="mainnet", providers=["CETUS", "KRIYA"])
        self.assertEqual(options.providers, ("CETUS", "KRIYA"))

    def test_unknown_provider(self):
        options = SdkOptions(env="mainnet", providers=["CETUS", "UNISWAP"])
        with self.assertRaises(SdkConfigError) as ctx:
            options.validate()
        self.assertIn("UNISWAP", str(ctx.exception))

    def test_duplicate_provider(self):
        options = SdkOptions(env="mainnet", providers=["CETUS", "CETUS"])
        with self.assertRaises(SdkConfigError):
            options.validate()

    def test_bad_rpc_url(self):
        options = SdkOptions(env="mainnet", full_rpc_url="fullnode.mainnet.sui.io")
        with self.assertRaises(SdkConfigError) as ctx:
            options.validate()
        self.assertEqual(ctx.exception.field, "full_rpc_url")

    def test_packages_validated_with_field_name(self):
        options = BurnSdkOptions(env="mainnet", burn=Package(package_id=ADDRESS, published_at=ADDRESS, version=0))
        with self.assertRaises(SdkConfigError) as ctx:
            options.validate()
        self.assertEqual(ctx.exception.field, "burn.version")

    def test_packages(self):
        self.assertEqual(list(burn_mainnet.packages()), ["burn"])
        self.assertEqual(zap_testnet.packages(), {})

    def test_zap_requires_aggregator(self):
        options = ZapSdkOptions(env="mainnet", providers=["CETUS"])
        with self.assertRaises(SdkConfigError) as ctx:
            options.validate()
        self.assertEqual(ctx.exception.field, "aggregator_url")

    def test_zap_rejects_empty_providers(self):
        options = ZapSdkOptions(env="mainnet", aggregator_url="https://example.com/router", providers=[])
        with self.assertRaises(SdkConfigError) as ctx:
            options.validate()
        self.assertEqual(ctx.exception.field, "providers")

    def test_package_field_from_mapping(self):
        options = BurnSdkOptions(env="mainnet", burn={"package_id": ADDRESS, "published_at": ADDRESS, "version": 1})
        self.assertIsInstance(options.burn, Package)
        options.validate()

    def test_zap_requires_providers(self):
        options = ZapSdkOptions(env="mainnet", aggregator_url="https://example.com/router")
        with self.assertRaises(SdkConfigError) as ctx:
            options.validate()
        self.assertEqual(ctx.exception.field, "providers")

    def test_zap_pyth_urls(self):
        options = ZapSdkOptions(
            env="mainnet",
            aggregator_url="https://example.com/router",
            providers=["CETUS"],
            pyth_urls=["https://hermes.pyth.network"],
        )
        options.validate()
        self.assertEqual(options.pyth_urls, ("https://hermes.pyth.network",))

    def test_subclass_requires_its_package(self):
        with self.assertRaises(TypeError):
            BurnSdkOptions(env="mainnet")

    def test_to_dict_is_json_ready(self):
        data = burn_mainnet.to_dict()
        self.assertEqual(data["env"], "mainnet")
        self.assertEqual(data["burn"]["version"], 7)
        self.assertIsInstance(data["burn"]["config"], dict)
        json.dumps(data)

    def test_to_dict_nested(self):
        data = vaults_mainnet.to_dict()
        self.assertEqual(data["providers"], [])
        self.assertIsInstance(data["vest"]["config"]["create_event_list"][0], dict)
        json.dumps(data)


class TestCrossSwapConfigs(unittest.TestCase):
    def test_mayan_to_dict(self):
        mayan = MayanConfig(referrer_addresses={"sui": ADDRESS}, referrer_bps=50)
        self.assertEqual(mayan.to_dict(), {"referrer_addresses": {"sui": ADDRESS}, "referrer_bps": 50})
        with self.assertRaises(TypeError):
            mayan.referrer_addresses["evm"] = ADDRESS

    def test_lifi_defaults(self):
        lifi = LifiConfig(integrator="cetus")
        self.assertIsNone(lifi.api_key)
        self.assertIsNone(lifi.referrer_bps)


if __name__ == '__main__':
    unittest.main()
