"""测试用的四种 appx 清单模板与 `config.xml`。"""

WINDOWS10_MANIFEST = """<?xml version="1.0" encoding="utf-8"?>
<Package xmlns="http://schemas.microsoft.com/appx/manifest/foundation/windows10"
         xmlns:mp="http://schemas.microsoft.com/appx/2014/phone/manifest"
         xmlns:uap="http://schemas.microsoft.com/appx/manifest/uap/windows10"
         IgnorableNamespaces="uap mp">
  <Identity Name="$guid1$" Version="1.0.0.0" Publisher="CN=$username$" />
  <mp:PhoneIdentity PhoneProductId="$guid1$" PhonePublisherId="00000000-0000-0000-0000-000000000000" />
  <Properties>
    <DisplayName>$projectname$</DisplayName>
    <PublisherDisplayName>$username$</PublisherDisplayName>
    <Logo>images\\StoreLogo.png</Logo>
  </Properties>
  <Dependencies>
    <TargetDeviceFamily Name="Windows.Universal" MinVersion="10.0.0.0" MaxVersionTested="10.0.0.0" />
  </Dependencies>
  <Resources>
    <Resource Language="x-generate" />
  </Resources>
  <Applications>
    <Application Id="$safeprojectname$" StartPage="www/index.html">
      <uap:VisualElements DisplayName="$projectname$" Description="CordovaApp"
                          BackgroundColor="#464646" Square150x150Logo="images\\Square150x150Logo.png"
                          Square44x44Logo="images\\Square44x44Logo.png">
        <uap:SplashScreen Image="images\\splashscreen.png" />
      </uap:VisualElements>
    </Application>
  </Applications>
  <Capabilities>
    <Capability Name="internetClient" />
  </Capabilities>
</Package>
"""

WINDOWS81_MANIFEST = """<?xml version="1.0" encoding="utf-8"?>
<Package xmlns="http://schemas.microsoft.com/appx/2010/manifest"
         xmlns:m2="http://schemas.microsoft.com/appx/2013/manifest">
  <Identity Name="$guid1$" Version="1.0.0.0" Publisher="CN=$username$" />
  <Properties>
    <DisplayName>$projectname$</DisplayName>
    <PublisherDisplayName>$username$</PublisherDisplayName>
    <Logo>images\\storelogo.png</Logo>
  </Properties>
  <Prerequisites>
    <OSMinVersion>6.3.0</OSMinVersion>
    <OSMaxVersionTested>6.3.0</OSMaxVersionTested>
  </Prerequisites>
  <Resources>
    <Resource Language="x-generate" />
  </Resources>
  <Applications>
    <Application Id="$safeprojectname$" StartPage="www/index.html">
      <m2:VisualElements DisplayName="$projectname$" Description="CordovaApp"
                         ForegroundText="light" BackgroundColor="#464646" ToastCapable="true"
                         Square150x150Logo="images\\Square150x150Logo.png" Square30x30Logo="images\\Square30x30Logo.png">
        <m2:SplashScreen Image="images\\splashscreen.png" />
      </m2:VisualElements>
    </Application>
  </Applications>
  <Capabilities>
    <Capability Name="internetClient" />
  </Capabilities>
</Package>
"""

WINDOWS8_MANIFEST = """<?xml version="1.0" encoding="utf-8"?>
<Package xmlns="http://schemas.microsoft.com/appx/2010/manifest">
  <Identity Name="$guid1$" Version="1.0.0.0" Publisher="CN=$username$" />
  <Properties>
    <DisplayName>$projectname$</DisplayName>
    <PublisherDisplayName>$username$</PublisherDisplayName>
    <Logo>images\\storelogo.png</Logo>
  </Properties>
  <Prerequisites>
    <OSMinVersion>6.2.1</OSMinVersion>
    <OSMaxVersionTested>6.2.1</OSMaxVersionTested>
  </Prerequisites>
  <Resources>
    <Resource Language="x-generate" />
  </Resources>
  <Applications>
    <Application Id="$safeprojectname$" StartPage="www/index.html">
      <VisualElements DisplayName="$projectname$" Logo="images\\logo.png" SmallLogo="images\\smalllogo.png"
                      Description="CordovaApp" ForegroundText="light" BackgroundColor="#464646">
        <DefaultTile ShowName="allLogos" />
        <SplashScreen Image="images\\splashscreen.png" />
      </VisualElements>
    </Application>
  </Applications>
  <Capabilities>
    <Capability Name="internetClient" />
  </Capabilities>
</Package>
"""

PHONE_MANIFEST = """<?xml version="1.0" encoding="utf-8"?>
<Package xmlns="http://schemas.microsoft.com/appx/2010/manifest"
         xmlns:m2="http://schemas.microsoft.com/appx/2013/manifest"
         xmlns:m3="http://schemas.microsoft.com/appx/2014/manifest"
         xmlns:mp="http://schemas.microsoft.com/appx/2014/phone/manifest">
  <Identity Name="$guid1$" Version="1.0.0.0" Publisher="CN=$username$" />
  <mp:PhoneIdentity PhoneProductId="$guid1$" PhonePublisherId="00000000-0000-0000-0000-000000000000" />
  <Properties>
    <DisplayName>$projectname$</DisplayName>
    <PublisherDisplayName>$username$</PublisherDisplayName>
    <Logo>images\\StoreLogo.png</Logo>
  </Properties>
  <Prerequisites>
    <OSMinVersion>6.3.1</OSMinVersion>
    <OSMaxVersionTested>6.3.1</OSMaxVersionTested>
  </Prerequisites>
  <Resources>
    <Resource Language="x-generate" />
  </Resources>
  <Applications>
    <Application Id="$safeprojectname$" StartPage="www/index.html">
      <m3:VisualElements DisplayName="$projectname$" Square150x150Logo="images\\Square150x150Logo.png"
                         Square44x44Logo="images\\Square44x44Logo.png" Description="CordovaApp"
                         ForegroundText="light" BackgroundColor="transparent">
        <m3:SplashScreen Image="images\\SplashScreenPhone.png" />
      </m3:VisualElements>
    </Application>
  </Applications>
  <Capabilities>
    <Capability Name="internetClientServer" />
  </Capabilities>
</Package>
"""

WINDOWS10_PROJECT = """<?xml version="1.0" encoding="utf-8"?>
<Project ToolsVersion="14.0" DefaultTargets="Build" xmlns="http://schemas.microsoft.com/developer/msbuild/2003">
  <PropertyGroup Label="Globals">
    <ProjectGuid>{58950fb6-2f93-4963-b9cd-637f83f3efbf}</ProjectGuid>
  </PropertyGroup>
  <PropertyGroup>
    <TargetPlatformIdentifier>UAP</TargetPlatformIdentifier>
    <TargetPlatformVersion>10.0.10030.0</TargetPlatformVersion>
    <TargetPlatformMinVersion>10.0.10030.0</TargetPlatformMinVersion>
  </PropertyGroup>
</Project>
"""

CONFIG_XML = """<?xml version='1.0' encoding='utf-8'?>
<widget id="org.example.hello" version="1.2" xmlns="http://www.w3.org/ns/widgets"
        xmlns:cdv="http://cordova.apache.org/ns/1.0" defaultlocale="fr-FR">
    <name>HelloCordova</name>
    <description>A sample Apache Cordova application.</description>
    <author email="dev@example.org" href="http://example.org">Example Team</author>
    <content src="index.html" />
    <access origin="https://api.example.org" />
    <access origin="ftp://files.example.org" />
    <allow-navigation href="https://example.org/*" />
    <preference name="Orientation" value="landscape" />
    <preference name="BackgroundColor" value="0xFF112233" />
    <icon src="res/icon.png" width="150" height="150" />
    <splash src="res/splash.png" width="620" height="300" />
    <platform name="windows">
        <preference name="orientation" value="portrait" />
        <preference name="Windows.Mobile-MinVersion" value="10.0.14000.0" />
        <icon src="res/logo44.png" target="Square44x44Logo" />
    </platform>
    <platform name="android">
        <preference name="Fullscreen" value="true" />
    </platform>
</widget>
"""

ALL_MANIFESTS = {
    "package.windows.appxmanifest": WINDOWS81_MANIFEST,
    "package.windows80.appxmanifest": WINDOWS8_MANIFEST,
    "package.windows10.appxmanifest": WINDOWS10_MANIFEST,
    "package.phone.appxmanifest": PHONE_MANIFEST,
}
