import os
import sys

import pytest

PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)


TRADER_HEADER = """\
#if !defined(THOST_FTDCTRADERAPI_H)
#define THOST_FTDCTRADERAPI_H

#include "ThostFtdcUserApiStruct.h"

class CThostFtdcTraderSpi
{
public:
\t///当客户端与交易后台建立起通信连接时（还未登录前），该方法被调用。
\tvirtual void OnFrontConnected(){};

\tvirtual void OnFrontDisconnected(int nReason){};

\tvirtual void OnRspError(CThostFtdcRspInfoField *pRspInfo, int nRequestID, bool bIsLast) {};
};

class TRADER_API_EXPORT CThostFtdcTraderApi
{
public:
\tstatic CThostFtdcTraderApi *CreateFtdcTraderApi(const char *pszFlowPath = "");

\tstatic const char *GetApiVersion();

\tvirtual void Release() = 0;

\tvirtual int SubscribePrivateTopic(THOST_TE_RESUME_TYPE nResumeType) = 0;

\tvirtual int ReqUserLogin(CThostFtdcReqUserLoginField *pReqUserLoginField, int nRequestID) = 0;
protected:
\t~CThostFtdcTraderApi(){};
};

#endif
"""


MD_HEADER = """\
class CThostFtdcMdSpi
{
public:
\tvirtual void OnFrontConnected(){};
\tvirtual void OnRtnDepthMarketData(CThostFtdcDepthMarketDataField *pDepthMarketData) {};
};

class MD_API_EXPORT CThostFtdcMdApi
{
public:
\tstatic CThostFtdcMdApi *CreateFtdcMdApi(const char *pszFlowPath = "", const bool bIsUsingUdp=false, const bool bIsMulticast=false);
\tvirtual int SubscribeMarketData(char *ppInstrumentID[], int nCount) = 0;
};
"""


BINDINGS = '''\
/* automatically generated by rust-bindgen 0.59.2 */

pub const THOST_FTDC_VC_AV: u8 = 49u8;
extern "C" {
    pub fn Rust_CThostFtdcTraderSpi_Trait_OnFrontConnected(rust: *mut ::std::os::raw::c_void);
}
extern "C" {
    pub fn Rust_CThostFtdcTraderSpi_Trait_OnRspError(
        rust: *mut ::std::os::raw::c_void,
        pRspInfo: *mut CThostFtdcRspInfoField,
        nRequestID: ::std::os::raw::c_int,
        bIsLast: bool,
    );
}
#[repr(C)]
pub struct Rust_CThostFtdcMdSpi {
    pub _base: CThostFtdcMdSpi,
}
extern "C" {
    pub fn Rust_CThostFtdcMdSpi_Trait_OnFrontConnected(rust: *mut ::std::os::raw::c_void);
}
'''


@pytest.fixture
def trader_header():
    return TRADER_HEADER


@pytest.fixture
def md_header():
    return MD_HEADER


@pytest.fixture
def bindings():
    return BINDINGS
