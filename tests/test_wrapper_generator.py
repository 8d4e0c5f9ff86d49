from ctpgen import ClassDecl, ClassModelBuilder, DualCodeGenerator, GeneratorConfig, Role


def generate(text, config=None):
    classes = ClassModelBuilder().build_text(text)
    return DualCodeGenerator(config).generate(classes)


def test_roles():
    gen = DualCodeGenerator()
    assert gen.role_of(ClassDecl("CThostFtdcTraderApi")) is Role.API
    assert gen.role_of(ClassDecl("CThostFtdcMdApi")) is Role.API
    assert gen.role_of(ClassDecl("CThostFtdcMdSpi")) is Role.CALLBACK
    assert gen.role_of(ClassDecl("CThostFtdcTraderSpi")) is Role.CALLBACK
    assert gen.role_of(ClassDecl("CThostFtdcTraderApiEx")) is Role.UNRECOGNIZED


def test_preambles(trader_header):
    unit = generate(trader_header)
    header = unit.header_text()
    source = unit.source_text()

    assert "#pragma once" in header
    assert '#include "../shared/include/ThostFtdcUserApiStruct.h"' in header
    assert '#include "wrapper.hpp"' in source


def test_factory_wraps_native_pointer(trader_header):
    unit = generate(trader_header)
    header = unit.header_text()
    source = unit.source_text()

    assert "class Rust_CThostFtdcTraderApi {" in header
    assert "    static Rust_CThostFtdcTraderApi* CreateFtdcTraderApi(const char * pszFlowPath);" in header
    assert "    CThostFtdcTraderApi * inner = nullptr;" in header
    assert "Rust_CThostFtdcTraderApi* self = new Rust_CThostFtdcTraderApi();" in source
    assert "self->inner = CThostFtdcTraderApi::CreateFtdcTraderApi(pszFlowPath);" in source


def test_static_and_instance_forwarding(trader_header):
    unit = generate(trader_header)
    header = unit.header_text()
    source = unit.source_text()

    assert "    static const char * GetApiVersion();" in header
    assert ("const char * Rust_CThostFtdcTraderApi::GetApiVersion() "
            "{ return CThostFtdcTraderApi::GetApiVersion(); }") in source
    assert ("int Rust_CThostFtdcTraderApi::ReqUserLogin(CThostFtdcReqUserLoginField * pReqUserLoginField, "
            "int nRequestID) { return inner->ReqUserLogin(pReqUserLoginField, nRequestID); }") in source


def test_array_parameters_forward_by_name(md_header):
    source = generate(md_header).source_text()
    assert "return inner->SubscribeMarketData(ppInstrumentID, nCount);" in source
    assert "SubscribeMarketData(char * ppInstrumentID[], int nCount)" in source


def test_callback_adapter(trader_header):
    unit = generate(trader_header)
    header = unit.header_text()
    source = unit.source_text()

    assert "class Rust_CThostFtdcTraderSpi : public CThostFtdcTraderSpi {" in header
    assert "    static CThostFtdcTraderSpi* Create(void * trait);" in header
    assert "    static void Destroy(CThostFtdcTraderSpi* ptr);" in header
    assert "    void * rust = nullptr;" in header
    assert "    void OnFrontConnected() override;" in header
    assert "p->rust = trait;" in source
    assert "delete static_cast<Rust_CThostFtdcTraderSpi*>(ptr);" in source


def test_callback_upcalls(trader_header):
    unit = generate(trader_header)
    header = unit.header_text()
    source = unit.source_text()

    assert 'extern "C" void Rust_CThostFtdcTraderSpi_Trait_OnFrontConnected(void * rust);' in header
    assert ('extern "C" void Rust_CThostFtdcTraderSpi_Trait_OnRspError(void * rust, '
            'CThostFtdcRspInfoField * pRspInfo, int nRequestID, bool bIsLast);') in header
    assert ("void Rust_CThostFtdcTraderSpi::OnFrontConnected() "
            "{ return Rust_CThostFtdcTraderSpi_Trait_OnFrontConnected(rust); }") in source
    assert ("return Rust_CThostFtdcTraderSpi_Trait_OnRspError(rust, pRspInfo, nRequestID, bIsLast);"
            in source)


def test_declaration_order_is_preserved(trader_header):
    header = generate(trader_header).header_text()
    assert header.index("OnFrontConnected() override") < header.index("OnFrontDisconnected(int nReason) override")
    assert header.index("class Rust_CThostFtdcTraderSpi") < header.index("class Rust_CThostFtdcTraderApi")


def test_unrecognized_class_is_skipped(caplog):
    text = "class CThostFtdcUnknown\n\tvirtual void Foo() = 0;\n"
    with caplog.at_level("INFO", logger="ctpgen.wrapper_generator"):
        unit = generate(text)

    assert "Foo" not in unit.header_text()
    assert "Foo" not in unit.source_text()
    assert "CThostFtdcUnknown" in caplog.text


def test_destructor_is_not_forwarded():
    text = "class CThostFtdcMdApi\n\tvirtual ~CThostFtdcMdApi(){};\n\tvirtual void Release() = 0;\n"
    unit = generate(text)
    assert "~" not in unit.source_text()
    assert "void Release();" in unit.header_text()


def test_custom_prefix(md_header):
    unit = generate(md_header, GeneratorConfig(prefix="Py_"))
    assert "class Py_CThostFtdcMdApi {" in unit.header_text()
    assert "Py_CThostFtdcMdSpi_Trait_OnFrontConnected(rust)" in unit.source_text()
